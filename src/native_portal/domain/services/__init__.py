"""Domain services package."""

from .formatting import (
    daily_net_amounts,
    display_name,
    format_amount,
    format_date,
    summarize_transactions,
)
from .normalization import normalize_category_tag, normalize_email
from .pipeline import (
    apply_list_pipeline,
    apply_view_state,
    clamp_page,
    filter_transactions,
    paginate,
    sort_transactions,
    timestamp_instant,
    toggle_sort,
    total_pages_for,
)
from .projection import categorize, project_transaction, project_transactions
from .validation import (
    is_valid_email,
    validate_credentials_input,
    validate_password_change,
)

__all__ = [
    "daily_net_amounts",
    "display_name",
    "format_amount",
    "format_date",
    "summarize_transactions",
    "normalize_category_tag",
    "normalize_email",
    "apply_list_pipeline",
    "apply_view_state",
    "clamp_page",
    "filter_transactions",
    "paginate",
    "sort_transactions",
    "timestamp_instant",
    "toggle_sort",
    "total_pages_for",
    "categorize",
    "project_transaction",
    "project_transactions",
    "is_valid_email",
    "validate_credentials_input",
    "validate_password_change",
]
