"""DataSet payloads: the dataset itself, its columns, rows and RSS feeds."""

from __future__ import annotations

from .base import CmsModel, Flag


class DataSetColumn(CmsModel):
    data_set_column_id: int
    data_set_id: int
    heading: str
    data_type_id: int
    data_set_column_type_id: int
    column_order: int | None = None
    list_content: str | None = None
    formula: str | None = None
    remote_field: str | None = None
    show_filter: Flag | None = None
    show_sort: Flag | None = None
    tooltip: str | None = None
    is_required: Flag | None = None
    date_format: str | None = None
    data_type: str | None = None
    data_set_column_type: str | None = None


class DataSet(CmsModel):
    data_set_id: int
    data_set: str
    description: str | None = None
    code: str | None = None
    user_id: int | None = None
    owner: str | None = None
    is_lookup: Flag | None = None
    is_remote: Flag | None = None
    is_real_time: Flag | None = None
    method: str | None = None
    uri: str | None = None
    refresh_rate: int | None = None
    clear_rate: int | None = None
    runs_after: int | str | None = None
    data_root: str | None = None
    last_data_edit: int | None = None
    last_sync: int | str | None = None
    folder_id: int | None = None
    permissions_folder_id: int | None = None
    columns: list[DataSetColumn] | None = None


class DataSetRow(CmsModel):
    """One data row; column values arrive keyed by heading."""

    id: int


class DataSetRss(CmsModel):
    rss_id: int | None = None
    id: int | None = None
    title: str
    url: str | None = None
    psk: str | None = None
    cache_timeout: int | None = None
    last_sync: str | None = None
    last_sync_status: int | None = None
    last_sync_message: str | None = None
    summary_column_id: int | None = None
    content_column_id: int | None = None
    published_date_column_id: int | None = None
