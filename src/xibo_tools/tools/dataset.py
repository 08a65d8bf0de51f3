"""DataSet tools: datasets, columns, rows, imports, data connectors and RSS feeds."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, TypeAdapter

from ..core import Envelope, Failure, Success, ToolMetadata
from ..http import CmsParams, CmsTool, Encoding, Endpoint, UploadParams
from ..schemas import DataSet, DataSetColumn, DataSetRow, DataSetRss
from ..utils import build_tree, create_tree_view_payload


class DataSetRef(CmsParams):
    data_set_id: int = Field(..., description="ID of the dataset")


# ─────────────────────────────────────────────────────────────────────────────
# DataSets
# ─────────────────────────────────────────────────────────────────────────────


class DataSetFilter(CmsParams):
    data_set_id: int | None = Field(default=None, description="Filter by dataset ID")
    data_set: str | None = Field(default=None, description="Filter by dataset name")
    code: str | None = Field(default=None, description="Filter by dataset code")
    is_real_time: bool | None = Field(default=None, description="Filter by real-time flag")
    user_id: int | None = Field(default=None, description="Filter by owner user ID")
    folder_id: int | None = Field(default=None, description="Filter by folder ID")
    embed: str | None = Field(default=None, description="Comma separated related data to embed, e.g. columns")
    tree_view: bool = Field(default=False, exclude=True, description="Also return a dataset/column tree")


class DataSetInput(CmsParams):
    data_set: str = Field(..., min_length=1, description="Dataset name")
    description: str | None = None
    code: str | None = Field(default=None, description="Code used to reference the dataset")
    is_remote: bool | None = Field(default=None, description="Fetch data from a remote source")
    is_real_time: bool | None = None
    data_connector_source: str | None = None
    folder_id: int | None = None
    method: Literal["GET", "POST"] | None = Field(default=None, description="Remote request method")
    uri: str | None = Field(default=None, description="Remote data source URI")
    post_data: str | None = None
    authentication: Literal["none", "plain", "basic", "digest", "ntlm", "bearer"] | None = None
    username: str | None = None
    password: str | None = None
    custom_headers: str | None = None
    user_agent: str | None = None
    refresh_rate: int | None = Field(default=None, ge=0, description="Seconds between remote syncs")
    clear_rate: int | None = Field(default=None, ge=0, description="Seconds between clears")
    truncate_on_empty: bool | None = None
    runs_after: int | None = Field(default=None, description="Dataset whose sync must run first")
    data_root: str | None = Field(default=None, description="Root element of the remote payload")
    summarize: str | None = None
    summarize_field: str | None = None
    source_id: int | None = Field(default=None, description="1 for JSON, 2 for CSV")
    ignore_first_row: bool | None = None
    row_limit: int | None = None
    limit_policy: Literal["stop", "fifo", "truncate"] | None = None
    csv_separator: str | None = None


class DataSetUpdate(DataSetInput):
    data_set_id: int = Field(..., description="ID of the dataset to edit")


def _dataset_node(dataset: dict[str, Any]) -> dict[str, Any]:
    return {
        "key": f"dataset:{dataset['dataSetId']}",
        "parentKey": None,
        "id": dataset["dataSetId"],
        "name": dataset["dataSet"],
        "type": "dataset",
    }


def _column_node(column: dict[str, Any]) -> dict[str, Any]:
    return {
        "key": f"column:{column['dataSetColumnId']}",
        "parentKey": f"dataset:{column['dataSetId']}",
        "id": column["dataSetColumnId"],
        "name": column["heading"],
        "type": "column",
        "dataType": column.get("dataType"),
    }


def _dataset_label(node: dict[str, Any]) -> str:
    if node["type"] == "column" and node.get("dataType"):
        return f"column: {node['name']} [{node['dataType']}]"
    return f"{node['type']}: {node['name']}"


class GetDataSetsTool(CmsTool[DataSetFilter]):
    metadata = ToolMetadata(
        name="get_datasets",
        description="List datasets; with treeView, include their columns as a tree",
        category="dataset",
    )
    params_schema = DataSetFilter
    endpoint = Endpoint("GET", "/api/dataset")
    response = list[DataSet]

    def _values(self, params: DataSetFilter) -> dict[str, Any]:
        values = params.wire()
        if params.tree_view and not values.get("embed"):
            values["embed"] = "columns"
        return values

    def _postprocess(self, envelope: Success, params: DataSetFilter) -> Envelope:
        if not params.tree_view:
            return envelope
        flat: list[dict[str, Any]] = []
        for dataset in envelope.data:
            flat.append(_dataset_node(dataset))
            flat.extend(_column_node(column) for column in dataset.get("columns") or [])
        tree = build_tree(flat, "key", "parentKey")
        return Success(data=create_tree_view_payload(envelope.data, tree, _dataset_label))


class AddDataSetTool(CmsTool[DataSetInput]):
    metadata = ToolMetadata(
        name="add_dataset",
        description="Create a dataset, optionally backed by a remote JSON or CSV source",
        category="dataset",
        mutates=True,
    )
    params_schema = DataSetInput
    endpoint = Endpoint("POST", "/api/dataset")
    response = DataSet
    success_message = "Dataset added"


class EditDataSetTool(CmsTool[DataSetUpdate]):
    metadata = ToolMetadata(
        name="edit_dataset",
        description="Edit the name, code or remote source settings of a dataset",
        category="dataset",
        mutates=True,
    )
    params_schema = DataSetUpdate
    endpoint = Endpoint("PUT", "/api/dataset/{dataSetId}")
    response = DataSet
    success_message = "Dataset updated"


class DeleteDataSetTool(CmsTool[DataSetRef]):
    metadata = ToolMetadata(
        name="delete_dataset",
        description="Delete a dataset and all of its data",
        category="dataset",
        mutates=True,
    )
    params_schema = DataSetRef
    endpoint = Endpoint("DELETE", "/api/dataset/{dataSetId}")
    success_message = "Dataset deleted"


# ─────────────────────────────────────────────────────────────────────────────
# Columns
# ─────────────────────────────────────────────────────────────────────────────


class ColumnFilter(DataSetRef):
    data_set_column_id: int | None = Field(default=None, description="Filter by column ID")


class ColumnInput(DataSetRef):
    heading: str = Field(..., min_length=1, description="Column heading")
    data_type_id: int = Field(..., description="1 String, 2 Number, 3 Date, 4 External Image, 5 Library Image, 6 HTML")
    data_set_column_type_id: int = Field(..., description="1 Value, 2 Formula, 3 Remote")
    column_order: int | None = None
    list_content: str | None = Field(default=None, description="Comma separated allowed values")
    formula: str | None = None
    remote_field: str | None = Field(default=None, description="JSON path of the value in remote data")
    show_filter: bool | None = None
    show_sort: bool | None = None
    tooltip: str | None = None
    is_required: bool | None = None
    date_format: str | None = None


class ColumnUpdate(ColumnInput):
    data_set_column_id: int = Field(..., description="ID of the column to edit")


class ColumnRef(DataSetRef):
    data_set_column_id: int = Field(..., description="ID of the column")


class GetDataSetColumnsTool(CmsTool[ColumnFilter]):
    metadata = ToolMetadata(
        name="get_dataset_columns",
        description="List the columns of a dataset",
        category="dataset",
    )
    params_schema = ColumnFilter
    endpoint = Endpoint("GET", "/api/dataset/{dataSetId}/column")
    response = list[DataSetColumn]


class AddDataSetColumnTool(CmsTool[ColumnInput]):
    metadata = ToolMetadata(
        name="add_dataset_column",
        description="Add a value, formula or remote column to a dataset",
        category="dataset",
        mutates=True,
    )
    params_schema = ColumnInput
    endpoint = Endpoint("POST", "/api/dataset/{dataSetId}/column")
    response = DataSetColumn
    success_message = "Column added"


class EditDataSetColumnTool(CmsTool[ColumnUpdate]):
    metadata = ToolMetadata(
        name="edit_dataset_column",
        description="Edit the heading, type or display options of a dataset column",
        category="dataset",
        mutates=True,
    )
    params_schema = ColumnUpdate
    endpoint = Endpoint("PUT", "/api/dataset/{dataSetId}/column/{dataSetColumnId}")
    response = DataSetColumn
    success_message = "Column updated"


class DeleteDataSetColumnTool(CmsTool[ColumnRef]):
    metadata = ToolMetadata(
        name="delete_dataset_column",
        description="Delete a column from a dataset",
        category="dataset",
        mutates=True,
    )
    params_schema = ColumnRef
    endpoint = Endpoint("DELETE", "/api/dataset/{dataSetId}/column/{dataSetColumnId}")
    success_message = "Column deleted"


# ─────────────────────────────────────────────────────────────────────────────
# Rows
# ─────────────────────────────────────────────────────────────────────────────


class RowInput(DataSetRef):
    row_data: dict[str, str | int | float | bool | None] = Field(
        ...,
        min_length=1,
        description="Cell values keyed as dataSetColumnId_<columnId>",
    )


class RowUpdate(RowInput):
    row_id: int = Field(..., description="ID of the row to edit")


class RowRef(DataSetRef):
    row_id: int = Field(..., description="ID of the row")


class _RowWriteTool(CmsTool[RowInput]):
    def _values(self, params: RowInput) -> dict[str, Any]:
        values = params.wire()
        return {**values.pop("rowData"), **values}


class GetDataSetDataTool(CmsTool[DataSetRef]):
    metadata = ToolMetadata(
        name="get_dataset_data",
        description="Get the rows stored in a dataset",
        category="dataset",
    )
    params_schema = DataSetRef
    endpoint = Endpoint("GET", "/api/dataset/data/{dataSetId}")
    response = list[DataSetRow]


class AddDataSetDataTool(_RowWriteTool):
    metadata = ToolMetadata(
        name="add_dataset_data",
        description="Add a row of data to a dataset",
        category="dataset",
        mutates=True,
    )
    params_schema = RowInput
    endpoint = Endpoint("POST", "/api/dataset/data/{dataSetId}")
    response = DataSetRow
    success_message = "Row added"


class EditDataSetDataTool(_RowWriteTool):
    metadata = ToolMetadata(
        name="edit_dataset_data",
        description="Replace the values of an existing dataset row",
        category="dataset",
        mutates=True,
    )
    params_schema = RowUpdate
    endpoint = Endpoint("PUT", "/api/dataset/data/{dataSetId}/{rowId}")
    response = DataSetRow
    success_message = "Row updated"


class DeleteDataSetDataTool(CmsTool[RowRef]):
    metadata = ToolMetadata(
        name="delete_dataset_data",
        description="Delete a row from a dataset",
        category="dataset",
        mutates=True,
    )
    params_schema = RowRef
    endpoint = Endpoint("DELETE", "/api/dataset/data/{dataSetId}/{rowId}")
    success_message = "Row deleted"


# ─────────────────────────────────────────────────────────────────────────────
# Import / connector
# ─────────────────────────────────────────────────────────────────────────────


class JsonImportInput(DataSetRef):
    unique_keys: list[str] = Field(default_factory=list, description="Headings used to match existing rows")
    rows: list[dict[str, Any]] = Field(..., min_length=1, description="Rows keyed by column heading")
    truncate: bool = Field(default=False, description="Remove existing rows first")


class CsvImportInput(UploadParams):
    data_set_id: int = Field(..., description="ID of the dataset")
    overwrite: bool | None = Field(default=None, description="Replace existing rows")
    ignore_first_row: bool | None = Field(default=None, description="Skip the CSV header row")


class ConnectorInput(DataSetRef):
    data_connector_script: str = Field(..., description="JavaScript run by the data connector")


class ImportDataSetDataJsonTool(CmsTool[JsonImportInput]):
    metadata = ToolMetadata(
        name="import_dataset_data_json",
        description="Import rows into a dataset from a JSON document",
        category="dataset",
        mutates=True,
    )
    params_schema = JsonImportInput
    endpoint = Endpoint("POST", "/api/dataset/importjson/{dataSetId}", Encoding.JSON)
    success_message = "Rows imported"

    def _json_body(self, params: JsonImportInput) -> Any:
        return {"uniqueKeys": params.unique_keys, "truncate": params.truncate, "rows": params.rows}


class ImportDataSetDataCsvTool(CmsTool[CsvImportInput]):
    metadata = ToolMetadata(
        name="import_dataset_data_csv",
        description="Import rows into a dataset from a CSV file",
        category="dataset",
        mutates=True,
    )
    params_schema = CsvImportInput
    endpoint = Endpoint("POST", "/api/dataset/import/{dataSetId}", Encoding.MULTIPART)
    success_message = "CSV imported"


class EditDataSetConnectorTool(CmsTool[ConnectorInput]):
    metadata = ToolMetadata(
        name="edit_dataset_connector",
        description="Replace the data connector script of a real-time dataset",
        category="dataset",
        mutates=True,
    )
    params_schema = ConnectorInput
    endpoint = Endpoint("PUT", "/api/dataset/dataconnector/{dataSetId}")
    response = DataSet
    success_message = "Data connector updated"


# ─────────────────────────────────────────────────────────────────────────────
# RSS feeds
# ─────────────────────────────────────────────────────────────────────────────


class RssFields(CmsParams):
    title: str = Field(..., min_length=1, description="Feed title")
    author: str | None = None
    summary_column_id: int | None = Field(default=None, description="Column used as item summary")
    content_column_id: int | None = Field(default=None, description="Column used as item content")
    published_date_column_id: int | None = Field(default=None, description="Column used as item date")
    sort: str | None = None
    filter: str | None = None
    regenerate_psk: bool | None = Field(default=None, description="Issue a new feed key (edit only)")


class RssInput(DataSetRef, RssFields):
    pass


class RssUpdate(RssInput):
    rss_id: int = Field(..., description="ID of the RSS feed to edit")


class RssRef(DataSetRef):
    rss_id: int = Field(..., description="ID of the RSS feed")


class GetDataSetRssTool(CmsTool[DataSetRef]):
    metadata = ToolMetadata(
        name="get_dataset_rss",
        description="List the RSS feeds published from a dataset",
        category="dataset",
    )
    params_schema = DataSetRef
    endpoint = Endpoint("GET", "/api/dataset/{dataSetId}/rss")
    response = list[DataSetRss]


class AddDataSetRssTool(CmsTool[RssInput]):
    metadata = ToolMetadata(
        name="add_dataset_rss",
        description="Publish a dataset as an RSS feed",
        category="dataset",
        mutates=True,
    )
    params_schema = RssInput
    endpoint = Endpoint("POST", "/api/dataset/{dataSetId}/rss")
    response = DataSetRss
    success_message = "RSS feed added"


class EditDataSetRssTool(CmsTool[RssUpdate]):
    metadata = ToolMetadata(
        name="edit_dataset_rss",
        description="Edit the title or column mapping of a dataset RSS feed",
        category="dataset",
        mutates=True,
    )
    params_schema = RssUpdate
    endpoint = Endpoint("PUT", "/api/dataset/{dataSetId}/rss/{rssId}")
    response = DataSetRss
    success_message = "RSS feed updated"


class DeleteDataSetRssTool(CmsTool[RssRef]):
    metadata = ToolMetadata(
        name="delete_dataset_rss",
        description="Delete an RSS feed from a dataset",
        category="dataset",
        mutates=True,
    )
    params_schema = RssRef
    endpoint = Endpoint("DELETE", "/api/dataset/{dataSetId}/rss/{rssId}")
    success_message = "RSS feed deleted"


RssAction = Literal["get", "add", "edit", "delete"]


class ManageRssInput(DataSetRef):
    action: RssAction = Field(..., exclude=True, description="get, add, edit or delete")
    rss_id: int | None = Field(default=None, description="Required for edit and delete")
    data: RssFields | None = Field(default=None, exclude=True, description="Feed fields, required for add and edit")


_RSS_ENDPOINTS: dict[str, Endpoint] = {
    "get": Endpoint("GET", "/api/dataset/{dataSetId}/rss"),
    "add": Endpoint("POST", "/api/dataset/{dataSetId}/rss", Encoding.JSON),
    "edit": Endpoint("PUT", "/api/dataset/{dataSetId}/rss/{rssId}", Encoding.JSON),
    "delete": Endpoint("DELETE", "/api/dataset/{dataSetId}/rss/{rssId}"),
}

_RSS_SCHEMAS: dict[str, TypeAdapter[Any] | None] = {
    "get": TypeAdapter(list[DataSetRss]),
    "add": TypeAdapter(DataSetRss),
    "edit": TypeAdapter(DataSetRss),
    "delete": None,
}


class ManageDataSetRssTool(CmsTool[ManageRssInput]):
    """One entry point for every RSS feed operation, selected by ``action``."""

    metadata = ToolMetadata(
        name="manage_dataset_rss",
        description="Get, add, edit or delete dataset RSS feeds through a single action parameter",
        category="dataset",
        mutates=True,
    )
    params_schema = ManageRssInput
    endpoint = _RSS_ENDPOINTS["get"]

    def _endpoint_for(self, params: ManageRssInput) -> Endpoint:
        return _RSS_ENDPOINTS[params.action]

    def _schema_for(self, params: ManageRssInput) -> TypeAdapter[Any] | None:
        return _RSS_SCHEMAS[params.action]

    def _precheck(self, params: ManageRssInput) -> Failure | None:
        if params.action in ("edit", "delete") and params.rss_id is None:
            return Failure.precondition(f"rssId is required for the '{params.action}' action", field="rssId")
        if params.action in ("add", "edit") and params.data is None:
            return Failure.precondition(f"data is required for the '{params.action}' action", field="data")
        return None

    def _json_body(self, params: ManageRssInput) -> Any:
        return params.data.wire() if params.data is not None else {}


TOOLS = (
    GetDataSetsTool,
    AddDataSetTool,
    EditDataSetTool,
    DeleteDataSetTool,
    GetDataSetColumnsTool,
    AddDataSetColumnTool,
    EditDataSetColumnTool,
    DeleteDataSetColumnTool,
    GetDataSetDataTool,
    AddDataSetDataTool,
    EditDataSetDataTool,
    DeleteDataSetDataTool,
    ImportDataSetDataJsonTool,
    ImportDataSetDataCsvTool,
    EditDataSetConnectorTool,
    GetDataSetRssTool,
    AddDataSetRssTool,
    EditDataSetRssTool,
    DeleteDataSetRssTool,
    ManageDataSetRssTool,
)
