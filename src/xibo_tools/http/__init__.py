"""Request encoding, dispatch and the table-driven CmsTool."""

from .dispatch import dispatch, interpret_response
from .request import Encoding, Endpoint, RequestDescriptor, build_request, encode_pairs, substitute_path
from .tool import CmsParams, CmsTool, UploadParams, with_message

__all__ = [
    "CmsParams",
    "CmsTool",
    "Encoding",
    "Endpoint",
    "RequestDescriptor",
    "UploadParams",
    "build_request",
    "dispatch",
    "encode_pairs",
    "interpret_response",
    "substitute_path",
    "with_message",
]
