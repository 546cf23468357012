"""Streamlit entry point for the account portal."""

import csv
import io
import time
from collections.abc import Sequence

import altair as alt
import streamlit as st

from native_portal.application.ports.session_store import SessionStorePort
from native_portal.application.use_cases.change_password import (
    ChangePasswordUseCase,
)
from native_portal.application.use_cases.get_transaction_history import (
    GetTransactionHistoryUseCase,
)
from native_portal.application.use_cases.manage_session import (
    SignInUseCase,
    SignOutUseCase,
    require_session,
)
from native_portal.application.use_cases.transaction_list import (
    TransactionListController,
)
from native_portal.application.use_cases.verify_credentials import (
    VerifyCredentialsUseCase,
)
from native_portal.domain.errors import (
    PortalError,
    SessionRequiredError,
    ValidationError,
)
from native_portal.domain.models.accounts import Session
from native_portal.domain.models.transactions import (
    CategoryFilter,
    SortDirection,
    SortField,
    Transaction,
    TransactionCategory,
)
from native_portal.domain.services.formatting import (
    daily_net_amounts,
    display_name,
    format_amount,
    format_date,
    summarize_transactions,
)
from native_portal.infrastructure.container import (
    build_accounts_repository,
    build_credential_policy,
    build_session_store,
    build_transactions_repository,
)
from native_portal.infrastructure.settings import PortalSettings


ROUTE_KEY = "route"
LIST_KEY = "transaction_list"

LOGIN_ROUTE = "login"
DASHBOARD_ROUTE = "dashboard"
CHANGE_PASSWORD_ROUTE = "change-password"

# Cache options are fixed when the module is imported.
TRANSACTIONS_CACHE_TTL = PortalSettings.from_env().transactions_cache_ttl
TRANSACTIONS_CACHE_MAX_ENTRIES = 128

_SORT_LABELS = {
    SortField.DATE: "Date",
    SortField.CATEGORY: "Type",
    SortField.AMOUNT: "Amount",
}


def _navigate(route: str) -> None:
    """Switch the active view and rerun the script."""
    st.session_state[ROUTE_KEY] = route
    st.rerun()


def _sign_in(
    email: str,
    password: str,
    store: SessionStorePort,
    settings: PortalSettings,
) -> PortalError | None:
    """Run the sign-in use case; return the error to display, if any."""
    verify = VerifyCredentialsUseCase(
        build_accounts_repository(),
        credential_policy=build_credential_policy(settings),
    )
    try:
        SignInUseCase(verify, store).execute(email, password)
    except PortalError as exc:
        return exc
    return None


def _change_password(
    email: str,
    old_password: str,
    new_password: str,
    confirm_password: str,
    settings: PortalSettings,
) -> PortalError | None:
    """Run the password change use case; return the error, if any."""
    use_case = ChangePasswordUseCase(
        build_accounts_repository(),
        credential_policy=build_credential_policy(settings),
    )
    try:
        use_case.execute(email, old_password, new_password, confirm_password)
    except PortalError as exc:
        return exc
    return None


def _fetch_transactions(account_id: int | str) -> list[Transaction]:
    """Fetch projected transactions for the signed-in account."""
    use_case = GetTransactionHistoryUseCase(build_transactions_repository())
    return use_case.execute(account_id)


@st.cache_data(
    show_spinner=False,
    ttl=TRANSACTIONS_CACHE_TTL or None,
    max_entries=TRANSACTIONS_CACHE_MAX_ENTRIES,
)
def _load_transactions(account_id: int | str) -> list[Transaction]:
    """Cached wrapper around _fetch_transactions."""
    return _fetch_transactions(account_id)


def _transactions_for(
    account_id: int | str,
    settings: PortalSettings,
) -> list[Transaction]:
    """Load transactions, bypassing the cache when its TTL is 0."""
    if settings.transactions_cache_ttl <= 0:
        return _fetch_transactions(account_id)
    return _load_transactions(account_id)


def _list_controller(
    transactions: Sequence[Transaction],
) -> TransactionListController:
    """Return the session's list controller fed with the latest data."""
    controller = st.session_state.get(LIST_KEY)
    if controller is None:
        controller = TransactionListController(transactions)
        st.session_state[LIST_KEY] = controller
    else:
        controller.replace_transactions(transactions)
    return controller


def _table_rows(transactions: Sequence[Transaction]) -> list[dict[str, str]]:
    """Build display rows for the transaction table."""
    return [
        {
            "Date": format_date(txn.timestamp),
            "Type": txn.category.value,
            "Amount": format_amount(txn.amount),
        }
        for txn in transactions
    ]


def _transactions_csv(transactions: Sequence[Transaction]) -> str:
    """Serialize transactions for the Export button."""
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(["id", "date", "type", "amount"])
    for txn in transactions:
        writer.writerow(
            [txn.id, txn.timestamp, txn.category.value, f"{txn.amount:.2f}"]
        )
    return buffer.getvalue()


def _activity_chart_data(
    transactions: Sequence[Transaction],
) -> list[dict[str, str | float]]:
    """Prepare per-day net amounts for the activity chart."""
    return [
        {
            "date": day.isoformat(),
            "net": amount,
            "direction": (
                TransactionCategory.TOP_UP.value
                if amount >= 0
                else TransactionCategory.PURCHASE.value
            ),
            "amount_label": format_amount(amount),
        }
        for day, amount in daily_net_amounts(transactions)
    ]


def _sort_label(
    field: SortField,
    controller: TransactionListController,
) -> str:
    label = _SORT_LABELS[field]
    state = controller.state
    if state.sort_field is not field:
        return label
    arrow = "↑" if state.sort_direction is SortDirection.ASCENDING else "↓"
    return f"{label} {arrow}"


def _show_error(error: PortalError) -> None:
    if isinstance(error, ValidationError):
        for message in error.field_errors.values():
            st.error(message)
    else:
        st.error(str(error))


def _render_login(store: SessionStorePort, settings: PortalSettings) -> None:
    """Render the sign-in form."""
    st.title("Welcome to Native")
    st.caption("Sign in to your account to continue")
    with st.form("login"):
        email = st.text_input("Email Address", placeholder="Enter your email")
        password = st.text_input(
            "Password",
            type="password",
            placeholder="Enter your password",
        )
        submitted = st.form_submit_button("Sign In")
    if submitted:
        with st.spinner("Signing In..."):
            error = _sign_in(email, password, store, settings)
        if error is None:
            _navigate(DASHBOARD_ROUTE)
            return
        _show_error(error)
    if st.button("Need to change your password?"):
        _navigate(CHANGE_PASSWORD_ROUTE)


def _render_change_password(settings: PortalSettings) -> None:
    """Render the change-password form."""
    st.title("Change Password")
    st.caption("Update your account password")
    with st.form("change_password"):
        email = st.text_input("Email Address", placeholder="Enter your email")
        old_password = st.text_input(
            "Current Password",
            type="password",
            placeholder="Enter current password",
        )
        new_password = st.text_input(
            "New Password",
            type="password",
            placeholder="Enter new password",
        )
        confirm_password = st.text_input(
            "Confirm New Password",
            type="password",
            placeholder="Confirm new password",
        )
        submitted = st.form_submit_button("Update Password")
    if submitted:
        with st.spinner("Updating Password..."):
            error = _change_password(
                email,
                old_password,
                new_password,
                confirm_password,
                settings,
            )
        if error is None:
            st.success(
                "Password Changed! Your password has been successfully "
                "updated. Redirecting to login..."
            )
            time.sleep(settings.redirect_delay_seconds)
            _navigate(LOGIN_ROUTE)
            return
        _show_error(error)
    if st.button("Back"):
        _navigate(LOGIN_ROUTE)


def _render_activity_chart(transactions: Sequence[Transaction]) -> None:
    """Render a bar chart of daily net amounts."""
    data = _activity_chart_data(transactions)
    if not data:
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=3,
        cornerRadiusTopRight=3,
    ).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("net:Q", title="Net amount ($)"),
        color=alt.Color(
            "direction:N",
            scale=alt.Scale(
                domain=[
                    TransactionCategory.TOP_UP.value,
                    TransactionCategory.PURCHASE.value,
                ],
                range=["#2e7d32", "#e76f51"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("amount_label:N", title="Net"),
        ],
    ).properties(height=260)
    st.subheader("Activity")
    st.altair_chart(chart, width="stretch")


def _render_transactions(controller: TransactionListController) -> None:
    """Render filter, sort headers, the current page and export."""
    st.subheader("Recent Transactions")
    st.caption("Your latest financial activity")

    options = [item.value for item in CategoryFilter]
    selected = st.selectbox(
        "Filter",
        options=options,
        index=options.index(controller.state.filter.value),
    )
    controller.set_filter(selected)

    sort_columns = st.columns(len(_SORT_LABELS))
    for column, field in zip(sort_columns, _SORT_LABELS):
        label = _sort_label(field, controller)
        if column.button(label, key=f"sort_{field.value}"):
            controller.select_sort(field)
            st.rerun()

    page = controller.current_page()
    if page.total_pages > 1:
        requested = st.number_input(
            "Page",
            min_value=1,
            max_value=page.total_pages,
            value=page.page,
            step=1,
        )
        controller.go_to_page(int(requested))
        page = controller.current_page()

    if not page.rows:
        st.info("No transactions found.")
    else:
        st.dataframe(_table_rows(page.rows), width="stretch", hide_index=True)
    st.caption(
        f"Page {page.page} of {page.total_pages} · "
        f"{page.total_count} transactions"
    )
    st.download_button(
        "Export",
        data=_transactions_csv(controller.visible_transactions()),
        file_name="transactions.csv",
        mime="text/csv",
    )


def _render_dashboard(
    session: Session,
    store: SessionStorePort,
    settings: PortalSettings,
) -> None:
    """Render the signed-in dashboard."""
    name = display_name(session.first_name, session.last_name, session.email)
    st.title("Dashboard")
    st.caption(f"Welcome back, {name}")

    if st.sidebar.button("Change Password"):
        _navigate(CHANGE_PASSWORD_ROUTE)
        return
    if st.sidebar.button("Logout"):
        SignOutUseCase(store).execute()
        st.session_state.pop(LIST_KEY, None)
        _navigate(LOGIN_ROUTE)
        return

    profile_col, card_col = st.columns(2)
    with profile_col:
        st.subheader(name)
        st.write(session.email)
    with card_col:
        if session.card_url:
            st.image(session.card_url, caption="Activation card")
        else:
            st.info("No activation card on file.")

    if session.account_id is None:
        st.warning("Your session is missing account details. Sign in again.")
        return
    try:
        transactions = _transactions_for(session.account_id, settings)
    except PortalError as exc:
        st.error(str(exc))
        return

    totals = summarize_transactions(transactions)
    top_up_col, purchase_col, net_col = st.columns(3)
    top_up_col.metric("Top-ups", format_amount(totals.top_up_total))
    purchase_col.metric("Purchases", format_amount(-totals.purchase_total))
    net_col.metric("Net", format_amount(totals.net))

    controller = _list_controller(transactions)
    _render_transactions(controller)
    _render_activity_chart(transactions)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Native Portal", layout="wide")
    settings = PortalSettings.from_env()
    store = build_session_store(st.session_state, settings=settings)

    route = st.session_state.get(ROUTE_KEY, LOGIN_ROUTE)
    if route == CHANGE_PASSWORD_ROUTE:
        _render_change_password(settings)
        return
    if route == DASHBOARD_ROUTE:
        try:
            session = require_session(store)
        except SessionRequiredError:
            st.session_state[ROUTE_KEY] = LOGIN_ROUTE
        else:
            _render_dashboard(session, store, settings)
            return
    _render_login(store, settings)


if __name__ == "__main__":  # pragma: no cover
    main()
