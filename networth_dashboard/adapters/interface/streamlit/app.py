"""Streamlit dashboard entry point."""

from collections.abc import Sequence

import altair as alt
import streamlit as st

from networth_dashboard.adapters.formatting import (
    format_currency,
    format_runway,
    format_share,
    runway_severity,
)
from networth_dashboard.adapters.interface.streamlit.charts import (
    build_cashflow_figure,
    build_category_records,
    build_roll_up_records,
    category_color,
    category_selection_state,
    toggle_category_selection,
)
from networth_dashboard.domain.models import (
    AnalysisStatus,
    CashflowView,
    CategoryAggregate,
    IncomeStream,
)
from networth_dashboard.domain.services.scenarios import (
    ScenarioLimitExceededError,
)
from networth_dashboard.infrastructure.container import (
    build_cashflow_source,
    build_cashflow_use_case,
    build_net_worth_source,
    build_net_worth_use_case,
    build_runway_use_case,
)
from networth_dashboard.infrastructure.csv_table_source import (
    CsvTextTableSource,
    decode_csv_bytes,
)
from networth_dashboard.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

_SEVERITY_ICONS = {
    "infinite": "🟢",
    "good": "🟢",
    "warning": "🟠",
    "critical": "🔴",
}


def _fetch_net_worth(csv_text: str | None) -> CategoryAggregate | None:
    """Run the net worth use case on uploaded text or the configured file."""
    if csv_text is not None:
        source = CsvTextTableSource(csv_text, name="uploaded net worth CSV")
    else:
        try:
            source = build_net_worth_source()
        except RuntimeError as exc:
            get_app_logger().warning(str(exc))
            return None
    try:
        return build_net_worth_use_case(source).execute()
    except FileNotFoundError as exc:
        get_app_logger().error(f"Cannot read net worth export: {exc}")
        return None


@st.cache_data(show_spinner=False)
def _load_net_worth(
    csv_text: str | None,
    upload_name: str | None = None,
    schema_version: int = 1,
) -> CategoryAggregate | None:
    """Cached wrapper around _fetch_net_worth.

    Uploads are logged here so each distinct file is recorded once.
    """
    _ = schema_version
    _log_upload(upload_name)
    return _fetch_net_worth(csv_text)


def _fetch_cashflow(csv_text: str | None) -> CashflowView | None:
    """Run the cash flow use case on uploaded text or the configured file."""
    if csv_text is not None:
        source = CsvTextTableSource(csv_text, name="uploaded cash flow CSV")
    else:
        try:
            source = build_cashflow_source()
        except RuntimeError as exc:
            get_app_logger().warning(str(exc))
            return None
    try:
        return build_cashflow_use_case(source).execute()
    except FileNotFoundError as exc:
        get_app_logger().error(f"Cannot read income/expense export: {exc}")
        return None


@st.cache_data(show_spinner=False)
def _load_cashflow(
    csv_text: str | None,
    upload_name: str | None = None,
    schema_version: int = 1,
) -> CashflowView | None:
    """Cached wrapper around _fetch_cashflow."""
    _ = schema_version
    _log_upload(upload_name)
    return _fetch_cashflow(csv_text)


def _log_upload(upload_name: str | None) -> None:
    if upload_name is not None:
        get_usage_logger().info(f"CSV uploaded: {upload_name}")


def _read_upload(upload) -> tuple[str | None, str | None]:
    """Return the decoded content and file name of an upload, if any."""
    if upload is None:
        return None, None
    return decode_csv_bytes(upload.getvalue()), upload.name


def _init_session_state() -> None:
    """Seed the session with the default emergency fund settings."""
    defaults = {
        "income_streams": [{"id": 1, "name": "Income 1", "amount": 0.0}],
        "next_income_id": 2,
        "monthly_expenses": 0.0,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def _account_key(category: str, position: int) -> str:
    return f"fund_{category}_{position}"


def _selected_accounts(
    aggregate: CategoryAggregate,
) -> set[tuple[str, int]]:
    """Return the account selection stored in the session."""
    return {
        (category, position)
        for category, accounts in aggregate.accounts_by_category.items()
        for position in range(len(accounts))
        if st.session_state.get(_account_key(category, position), False)
    }


def _add_income_stream() -> None:
    next_id = st.session_state["next_income_id"]
    st.session_state["income_streams"] = [
        *st.session_state["income_streams"],
        {"id": next_id, "name": f"Income {next_id}", "amount": 0.0},
    ]
    st.session_state["next_income_id"] = next_id + 1


def _remove_income_stream(stream_id: int) -> None:
    st.session_state["income_streams"] = [
        stream
        for stream in st.session_state["income_streams"]
        if stream["id"] != stream_id
    ]


def _render_net_worth_chart(
    aggregate: CategoryAggregate,
    selected: Sequence[str],
) -> None:
    """Render stacked category areas with the net worth line on top."""
    records = build_category_records(aggregate, selected)
    roll_up = build_roll_up_records(aggregate, selected)
    dates = [point.time_label for point in aggregate.points]
    domain = list(aggregate.classification.all)
    color = alt.Color(
        "category:N",
        scale=alt.Scale(
            domain=domain,
            range=[
                category_color(aggregate.classification, category)
                for category in domain
            ],
        ),
        legend=alt.Legend(orient="top", title=None, columns=4),
    )
    x_axis = alt.X("date:N", sort=dates, axis=alt.Axis(labelAngle=-45))
    areas = [
        alt.Chart(alt.Data(values=records))
        .transform_filter(alt.datum.group == group)
        .mark_area(opacity=0.6)
        .encode(
            x=x_axis,
            y=alt.Y("amount:Q", stack="zero", title=None),
            color=color,
            tooltip=[
                alt.Tooltip("date:N"),
                alt.Tooltip("category:N"),
                alt.Tooltip("amount:Q", format="$,.2f"),
            ],
        )
        for group in ("positive", "negative")
    ]
    line = alt.Chart(alt.Data(values=roll_up)).mark_line(
        color="#000000",
        strokeWidth=3,
    ).encode(
        x=x_axis,
        y=alt.Y("net_worth:Q"),
        tooltip=[
            alt.Tooltip("date:N"),
            alt.Tooltip("net_worth:Q", title="Net Worth", format="$,.2f"),
        ],
    )
    chart = alt.layer(*areas, line).properties(height=600)
    st.altair_chart(chart, use_container_width=True)


def _render_net_worth(aggregate: CategoryAggregate) -> None:
    """Render the net worth tab."""
    categories = list(aggregate.classification.all)
    selected = st.multiselect(
        "Categories",
        options=categories,
        default=categories,
    )
    st.caption(f"{len(selected)} of {len(categories)} categories selected")
    _render_net_worth_chart(aggregate, selected)

    latest = aggregate.latest_point
    current = latest.roll_up_for(selected) if latest else 0
    st.metric(
        "Current Net Worth (Selected Categories)",
        format_currency(current),
    )
    st.subheader("Categories")
    st.dataframe(
        [
            {
                "Category": category,
                "Latest": format_currency(aggregate.latest_value(category)),
                "Debt": aggregate.latest_value(category) < 0,
            }
            for category in categories
        ],
        use_container_width=True,
        hide_index=True,
    )
    st.subheader("Accounts Included in Chart")
    if not selected:
        st.caption("No categories selected")
        return
    for category in selected:
        with st.expander(category):
            for account in aggregate.accounts_by_category.get(category, []):
                st.write(account.display_name)


def _render_cashflow(view: CashflowView | None) -> None:
    """Render the income and expenses tab."""
    st.subheader("Net Income & Expenses by Month")
    if view is None or view.status is not AnalysisStatus.OK:
        st.info(
            "Upload an income/expense export with 'Total Income' and "
            "'Total Expenses' rows."
        )
        return
    stats = view.statistics
    average_col, total_col, months_col = st.columns(3)
    with average_col:
        st.markdown("**Average Monthly**")
        st.write(f"Income: {format_currency(stats.average_income)}")
        st.write(f"Expenses: {format_currency(stats.average_expenses)}")
        st.write(f"Net: {format_currency(stats.average_net)}")
    with total_col:
        st.markdown(f"**Total ({stats.month_count} months)**")
        st.write(f"Income: {format_currency(stats.total_income)}")
        st.write(f"Expenses: {format_currency(stats.total_expenses)}")
        st.write(f"Net: {format_currency(stats.total_net)}")
    with months_col:
        st.markdown("**Month Distribution**")
        st.write(
            f"Positive Months: {stats.positive_months} "
            f"({format_share(stats.positive_share)})"
        )
        st.write(
            f"Negative Months: {stats.negative_months} "
            f"({format_share(stats.negative_share)})"
        )
    st.plotly_chart(build_cashflow_figure(view), use_container_width=True)


def _render_account_selection(aggregate: CategoryAggregate) -> None:
    """Render per-category account checkboxes for the emergency fund."""
    accounts_by_category = aggregate.accounts_by_category
    for category in aggregate.classification.all:
        accounts = accounts_by_category.get(category, [])
        if not accounts:
            continue
        state = category_selection_state(
            accounts_by_category,
            _selected_accounts(aggregate),
            category,
        )
        if st.button(
            f"{category} ({state})",
            key=f"toggle_{category}",
        ):
            updated = toggle_category_selection(
                accounts_by_category,
                _selected_accounts(aggregate),
                category,
            )
            for position in range(len(accounts)):
                st.session_state[_account_key(category, position)] = (
                    (category, position) in updated
                )
        for position, account in enumerate(accounts):
            closed = " (Closed)" if account.is_closed else ""
            st.checkbox(
                f"{account.display_name}{closed}: "
                f"{format_currency(account.latest_value)}",
                key=_account_key(category, position),
            )


def _render_income_inputs() -> list[IncomeStream]:
    """Render income stream inputs and return the parsed streams."""
    streams: list[IncomeStream] = []
    entries = st.session_state["income_streams"]
    for entry in entries:
        name_col, amount_col, remove_col = st.columns([3, 2, 1])
        name = name_col.text_input(
            "Income name",
            value=entry["name"],
            key=f"income_name_{entry['id']}",
        )
        amount = amount_col.number_input(
            "Monthly amount",
            min_value=0.0,
            step=100.0,
            value=float(entry["amount"]),
            key=f"income_amount_{entry['id']}",
        )
        entry["name"] = name
        entry["amount"] = amount
        if len(entries) > 1:
            remove_col.button(
                "×",
                key=f"income_remove_{entry['id']}",
                on_click=_remove_income_stream,
                args=(entry["id"],),
            )
        streams.append(IncomeStream.from_raw(entry["id"], name, amount))
    st.button("+ Add Income", on_click=_add_income_stream)
    return streams


def _render_emergency_funds(aggregate: CategoryAggregate) -> None:
    """Render the emergency fund calculator tab."""
    st.subheader("Emergency Fund Calculator")
    select_col, inputs_col = st.columns(2)
    with select_col:
        st.markdown("**Select Emergency Fund Accounts**")
        _render_account_selection(aggregate)
    with inputs_col:
        st.markdown("**Monthly Income & Expenses**")
        streams = _render_income_inputs()
        monthly_expenses = st.number_input(
            "Monthly Expenses",
            min_value=0.0,
            step=100.0,
            key="monthly_expenses",
        )

    try:
        projection = build_runway_use_case().execute(
            aggregate.accounts_by_category,
            _selected_accounts(aggregate),
            streams,
            monthly_expenses,
        )
    except ScenarioLimitExceededError as exc:
        st.error(str(exc))
        return

    fund_col, income_col, net_col = st.columns(3)
    fund_col.metric("Total Emergency Funds",
                    format_currency(projection.fund_total))
    income_col.metric("Total Monthly Income",
                      format_currency(projection.total_income))
    net_col.metric("Net Monthly", format_currency(projection.net_monthly))

    st.subheader("Emergency Fund Scenarios")
    if projection.status is AnalysisStatus.DEGENERATE:
        st.caption("Enter income and expenses to see scenarios")
        return
    columns = st.columns(3)
    for index, scenario in enumerate(projection.scenarios):
        icon = _SEVERITY_ICONS[runway_severity(scenario.months_remaining)]
        with columns[index % 3]:
            st.markdown(f"**{scenario.name}**")
            st.write(
                f"Active Income: {format_currency(scenario.active_income)}"
            )
            st.write(f"Net Monthly: {format_currency(scenario.net_monthly)}")
            st.write(
                f"Months of Funds: {icon} "
                f"{format_runway(scenario.months_remaining)}"
            )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Net Worth Dashboard", layout="wide")
    st.title("Net Worth by Category Over Time")

    net_worth_upload = st.sidebar.file_uploader(
        "Net worth CSV",
        type="csv",
    )
    cashflow_upload = st.sidebar.file_uploader(
        "Income & expenses CSV",
        type="csv",
    )
    _init_session_state()

    aggregate = _load_net_worth(*_read_upload(net_worth_upload))
    if aggregate is None or aggregate.status is not AnalysisStatus.OK:
        st.info("Upload a net worth CSV export to get started.")
        return
    cashflow = _load_cashflow(*_read_upload(cashflow_upload))

    net_worth_tab, cashflow_tab, funds_tab = st.tabs(
        ["Net Worth", "Income & Expenses", "Emergency Funds"]
    )
    with net_worth_tab:
        _render_net_worth(aggregate)
    with cashflow_tab:
        _render_cashflow(cashflow)
    with funds_tab:
        _render_emergency_funds(aggregate)


if __name__ == "__main__":  # pragma: no cover
    main()
