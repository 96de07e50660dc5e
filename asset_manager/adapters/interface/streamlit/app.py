"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from asset_manager.adapters.interface.streamlit.monthly_flow_sankey import (
    build_monthly_flow_model,
    build_plotly_figure,
)
from asset_manager.application.use_cases.get_cash_flow import (
    GetCashFlowUseCase,
)
from asset_manager.application.use_cases.get_money_manager import (
    GetMoneyManagerDataUseCase,
)
from asset_manager.application.use_cases.get_portfolio import (
    GetPortfolioUseCase,
)
from asset_manager.application.use_cases.initialize_database import (
    CheckDatabaseStatusUseCase,
    InitializeDatabaseUseCase,
)
from asset_manager.application.use_cases.manage_categories import (
    ManageCategoriesUseCase,
)
from asset_manager.application.use_cases.manage_transactions import (
    ManageTransactionsUseCase,
)
from asset_manager.application.use_cases.record_investments import (
    RecordInvestmentsUseCase,
)
from asset_manager.domain.models import (
    CashFlowSummary,
    ConversionInput,
    DatabaseStatus,
    DepositInput,
    GraphDataPoint,
    Holding,
    InvalidTransactionError,
    MoneyManagerData,
    MoneyTransaction,
    MutationResult,
    PortfolioSummary,
    TradeAction,
    TradeInput,
    TransactionType,
)
from asset_manager.infrastructure.container import (
    build_sector_classifier,
    build_settings,
    build_sheets_repository,
)
from asset_manager.infrastructure.logging.logger import get_usage_logger


REFRESH_SECONDS = 60

_PALETTE = [
    "#1b9aaa",
    "#2e7d32",
    "#f4a261",
    "#e76f51",
    "#457b9d",
    "#f6c453",
    "#6c8ead",
    "#a0c4ff",
]


def _fetch_portfolio() -> PortfolioSummary:
    """Fetch the portfolio summary from the spreadsheet."""
    settings = build_settings()
    use_case = GetPortfolioUseCase(
        sheets_repository=build_sheets_repository(settings),
        classifier=build_sector_classifier(settings),
        sheet_names=settings.sheet_names,
    )
    return use_case.execute()


@st.cache_data(ttl=REFRESH_SECONDS, show_spinner=False)
def _load_portfolio() -> PortfolioSummary:
    """Cached wrapper around _fetch_portfolio."""
    return _fetch_portfolio()


def _fetch_cash_flow() -> CashFlowSummary:
    """Fetch deposits and conversions from the spreadsheet."""
    settings = build_settings()
    use_case = GetCashFlowUseCase(
        sheets_repository=build_sheets_repository(settings),
        sheet_names=settings.sheet_names,
    )
    return use_case.execute()


@st.cache_data(ttl=REFRESH_SECONDS, show_spinner=False)
def _load_cash_flow() -> CashFlowSummary:
    """Cached wrapper around _fetch_cash_flow."""
    return _fetch_cash_flow()


def _fetch_money_manager() -> MoneyManagerData:
    """Fetch the money manager view from the spreadsheet."""
    settings = build_settings()
    use_case = GetMoneyManagerDataUseCase(
        sheets_repository=build_sheets_repository(settings),
        sheet_names=settings.sheet_names,
    )
    return use_case.execute()


@st.cache_data(ttl=REFRESH_SECONDS, show_spinner=False)
def _load_money_manager() -> MoneyManagerData:
    """Cached wrapper around _fetch_money_manager."""
    return _fetch_money_manager()


def _fetch_database_status() -> DatabaseStatus:
    settings = build_settings()
    use_case = CheckDatabaseStatusUseCase(
        sheets_repository=build_sheets_repository(settings),
        sheet_names=settings.sheet_names,
    )
    return use_case.execute()


def _mutation_use_cases():
    """Return the transaction, category and investment use cases."""
    settings = build_settings()
    repository = build_sheets_repository(settings)
    return (
        ManageTransactionsUseCase(repository, sheet_names=settings.sheet_names),
        ManageCategoriesUseCase(repository, sheet_names=settings.sheet_names),
        RecordInvestmentsUseCase(repository, sheet_names=settings.sheet_names),
    )


def _format_currency(value: Decimal, currency_code: str) -> str:
    """Format currency values for display."""
    symbols = {"MYR": "RM", "USD": "$"}
    symbol = symbols.get(currency_code, currency_code)
    return f"{symbol} {value:,.2f}"


def _format_percent(value: Decimal) -> str:
    """Format a signed percentage."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"


def _report_mutation(action: str, result: MutationResult) -> None:
    """Show a mutation outcome and drop cached reads after a success."""
    get_usage_logger().info(f"{action}: success={result.success}")
    if result.success:
        st.cache_data.clear()
        st.success(f"{action} saved.")
    else:
        st.error(result.error or f"{action} failed.")


def _prepare_allocation_chart_data(
    holdings: Sequence[Holding],
    group_by: str = "sector",
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        holdings: Holdings of the current snapshot.
        group_by: Holding attribute to group on (sector or asset_class).
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total value.
    """
    totals: dict[str, Decimal] = {}
    for holding in holdings:
        key = getattr(holding, group_by)
        totals[key] = totals.get(key, Decimal("0")) + holding.current_value
    sorted_items = sorted(
        totals.items(),
        key=lambda item: item[1],
        reverse=True,
    )
    top_items = sorted_items[:max_categories]
    other_amount = sum(
        (amount for _, amount in sorted_items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items = [*top_items, ("Other", other_amount)]
    total_amount = sum(totals.values(), start=Decimal("0"))
    data: list[dict[str, str | float]] = []
    for category, amount in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": category,
                "amount": float(amount),
                "amount_label": _format_currency(amount, "USD"),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _prepare_monthly_chart_data(
    graph_data: Sequence[GraphDataPoint],
) -> list[dict[str, str | float]]:
    """Flatten the monthly series into one record per month and kind."""
    data: list[dict[str, str | float]] = []
    for order, point in enumerate(graph_data):
        data.append(
            {
                "month": point.name,
                "order": order,
                "kind": "Income",
                "amount": float(point.income),
            }
        )
        data.append(
            {
                "month": point.name,
                "order": order,
                "kind": "Expense",
                "amount": float(point.expense),
            }
        )
    return data


def _render_allocation_chart(
    holdings: Sequence[Holding],
    title: str,
    group_by: str,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of holding value by sector or asset class."""
    if not holdings:
        st.info("No holdings available for the chart.")
        return
    data, _ = _prepare_allocation_chart_data(holdings, group_by=group_by)
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
        stroke="#0f1115",
        strokeWidth=2,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=_PALETTE),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.25)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
        color="#f5f7ff",
    ).encode(text="share_label:N")
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(stroke=None)
    st.subheader(title)
    st.altair_chart(chart, width="stretch")


def _render_monthly_chart(graph_data: Sequence[GraphDataPoint]) -> None:
    if not graph_data:
        st.info("No transactions recorded yet.")
        return
    chart = alt.Chart(
        alt.Data(values=_prepare_monthly_chart_data(graph_data))
    ).mark_bar(cornerRadiusTopLeft=4, cornerRadiusTopRight=4).encode(
        x=alt.X("month:N", sort=alt.SortField("order"), title=None),
        xOffset="kind:N",
        y=alt.Y("amount:Q", title="RM"),
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(
                domain=["Income", "Expense"],
                range=["#2e7d32", "#e76f51"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=["month:N", "kind:N", alt.Tooltip("amount:Q", format=",.2f")],
    )
    st.altair_chart(chart, width="stretch")


def _render_transaction_form(data: MoneyManagerData) -> None:
    """Render the add-transaction form."""
    tx_type = TransactionType(
        st.selectbox(
            "Type",
            [member.value for member in TransactionType],
            key="tx_type",
        )
    )
    categories = (
        data.income_categories
        if tx_type == TransactionType.INCOME
        else data.expense_categories
    )
    account_names = [account.name for account in data.accounts]
    with st.form("add_transaction", clear_on_submit=True):
        tx_date = st.date_input("Date", value=date.today())
        category = st.selectbox("Category", categories)
        amount = st.number_input("Amount (RM)", min_value=0.0, step=1.0)
        from_account = None
        to_account = None
        if tx_type in (TransactionType.EXPENSE, TransactionType.TRANSFER):
            from_account = st.selectbox("From account", account_names)
        if tx_type in (TransactionType.INCOME, TransactionType.TRANSFER):
            to_account = st.selectbox("To account", account_names)
        note = st.text_input("Note")
        submitted = st.form_submit_button("Add transaction")
    if not submitted:
        return
    try:
        transaction = MoneyTransaction.create(
            date=tx_date.isoformat(),
            type=tx_type,
            category=category or "",
            amount=Decimal(str(amount)),
            from_account=from_account,
            to_account=to_account,
            note=note or None,
        )
    except InvalidTransactionError as exc:
        st.error(str(exc))
        return
    transactions, _, _ = _mutation_use_cases()
    _report_mutation("Transaction", transactions.add_transaction(transaction))


def _render_transactions(data: MoneyManagerData) -> None:
    """Render the transaction table with a delete action."""
    st.subheader("Transactions")
    rows = [
        {
            "Date": tx.date,
            "Type": tx.type_label,
            "Category": tx.category,
            "Amount": float(tx.amount),
            "From": tx.from_account or "",
            "To": tx.to_account or "",
            "Note": tx.note or "",
        }
        for tx in data.transactions
    ]
    st.dataframe(rows, width="stretch", hide_index=True, height=360)
    if not data.transactions:
        return
    by_label = {
        f"{tx.date} · {tx.category} · {tx.amount:,.2f}": tx
        for tx in data.transactions
    }
    selected = st.selectbox("Transaction", list(by_label), key="tx_delete")
    if st.button("Delete transaction"):
        target = by_label[selected]
        transactions, _, _ = _mutation_use_cases()
        _report_mutation(
            "Delete",
            transactions.delete_transaction(
                row_index=target.row_index,
                uid=target.uid,
            ),
        )


def _render_categories(data: MoneyManagerData) -> None:
    """Render category management for both lists."""
    st.subheader("Categories")
    _, categories, _ = _mutation_use_cases()
    for tx_type in (TransactionType.EXPENSE, TransactionType.INCOME):
        names = (
            data.income_categories
            if tx_type == TransactionType.INCOME
            else data.expense_categories
        )
        with st.expander(f"{tx_type.value} categories"):
            st.write(", ".join(names))
            new_name = st.text_input("New category", key=f"new_{tx_type.value}")
            if st.button("Add", key=f"add_{tx_type.value}"):
                _report_mutation(
                    "Category",
                    categories.add_category(new_name, tx_type),
                )
            selected = st.selectbox(
                "Existing category",
                names,
                key=f"pick_{tx_type.value}",
            )
            renamed = st.text_input("Rename to", key=f"rename_{tx_type.value}")
            rename_col, delete_col = st.columns(2)
            if rename_col.button("Rename", key=f"do_rename_{tx_type.value}"):
                _report_mutation(
                    "Category",
                    categories.update_category(selected, renamed, tx_type),
                )
            if delete_col.button("Delete", key=f"do_delete_{tx_type.value}"):
                _report_mutation(
                    "Delete",
                    categories.delete_category(selected, tx_type),
                )


def _render_monthly_flow(data: MoneyManagerData) -> None:
    """Render this month's income-to-spending Sankey."""
    today = date.today()
    model = build_monthly_flow_model(
        data.transactions,
        month=today.strftime("%Y-%m"),
        month_label=today.strftime("%b %Y"),
    )
    st.subheader("Money flow this month")
    if model.is_empty:
        st.info("No income or spending this month.")
        return
    st.plotly_chart(build_plotly_figure(model), width="stretch")


def _render_money_manager(data: MoneyManagerData) -> None:
    stats = data.monthly_stats
    balance_col, income_col, expense_col = st.columns(3)
    balance_col.metric(
        "Total balance",
        _format_currency(data.total_balance, "MYR"),
    )
    income_col.metric(
        "Income this month",
        _format_currency(stats.income, "MYR"),
        _format_percent(stats.income_growth),
    )
    expense_col.metric(
        "Expense this month",
        _format_currency(stats.expense, "MYR"),
        _format_percent(stats.expense_growth),
        delta_color="inverse",
    )

    chart_col, budget_col = st.columns(2)
    with chart_col:
        st.subheader("Income vs expense")
        _render_monthly_chart(data.graph_data)
    with budget_col:
        st.subheader("Spending by category")
        if not data.category_spending:
            st.info("No spending this month.")
        for item in data.category_spending:
            st.progress(
                min(float(item.percentage) / 100, 1.0),
                text=(
                    f"{item.category}: "
                    f"{_format_currency(item.spent, 'MYR')} of "
                    f"{_format_currency(item.limit, 'MYR')}"
                ),
            )

    _render_monthly_flow(data)

    st.subheader("Accounts")
    st.dataframe(
        [
            {
                "Name": account.name,
                "Category": account.category,
                "Balance": float(account.current_balance),
            }
            for account in data.accounts
        ],
        width="stretch",
        hide_index=True,
    )
    if data.upcoming_bills:
        st.subheader("Upcoming bills")
        for bill in data.upcoming_bills:
            st.write(
                f"{bill.date} · {bill.name} · "
                f"{_format_currency(bill.amount, 'MYR')}"
            )

    add_tab, list_tab, category_tab = st.tabs(
        ["Add transaction", "Transactions", "Categories"]
    )
    with add_tab:
        _render_transaction_form(data)
    with list_tab:
        _render_transactions(data)
    with category_tab:
        _render_categories(data)


def _render_trade_form() -> None:
    with st.form("add_trade", clear_on_submit=True):
        trade_date = st.date_input("Date", value=date.today())
        ticker = st.text_input("Ticker")
        action = st.selectbox("Action", [a.value for a in TradeAction])
        quantity = st.number_input("Quantity", min_value=0.0, step=1.0)
        price = st.number_input("Price (USD)", min_value=0.0, step=0.01)
        fees = st.number_input("Fees (USD)", min_value=0.0, step=0.01)
        submitted = st.form_submit_button("Record trade")
    if not submitted:
        return
    if not ticker.strip():
        st.error("Ticker required")
        return
    _, _, investments = _mutation_use_cases()
    trade = TradeInput(
        date=trade_date.isoformat(),
        ticker=ticker,
        action=TradeAction(action),
        quantity=Decimal(str(quantity)),
        price=Decimal(str(price)),
        fees=Decimal(str(fees)),
    )
    _report_mutation("Trade", investments.add_trade(trade))


def _render_investments(summary: PortfolioSummary) -> None:
    worth_col, cost_col, pl_col, cash_col = st.columns(4)
    worth_col.metric("Net worth", _format_currency(summary.net_worth, "USD"))
    cost_col.metric("Total cost", _format_currency(summary.total_cost, "USD"))
    pl_col.metric(
        "Total P/L",
        _format_currency(summary.total_pl, "USD"),
        _format_percent(summary.total_pl_percent),
    )
    cash_col.metric("Cash", _format_currency(summary.cash_balance, "USD"))

    sector_col, class_col = st.columns(2)
    with sector_col:
        _render_allocation_chart(summary.holdings, "By sector", "sector")
    with class_col:
        _render_allocation_chart(
            summary.holdings,
            "By asset class",
            "asset_class",
        )

    st.subheader("Holdings")
    st.dataframe(
        [
            {
                "Ticker": h.ticker,
                "Quantity": float(h.quantity),
                "Avg cost": float(h.avg_cost),
                "Price": float(h.current_price),
                "Value": float(h.current_value),
                "P/L": float(h.unrealized_pl),
                "P/L %": float(h.unrealized_pl_percent),
                "Allocation %": float(h.allocation),
                "Sector": h.sector,
                "Class": h.asset_class,
            }
            for h in summary.holdings
        ],
        width="stretch",
        hide_index=True,
    )
    with st.expander("Record trade"):
        _render_trade_form()


def _render_cash_flow(summary: CashFlowSummary) -> None:
    deposit_col, myr_col, usd_col, rate_col = st.columns(4)
    deposit_col.metric(
        "Deposited",
        _format_currency(summary.total_deposited_myr, "MYR"),
    )
    myr_col.metric(
        "Converted",
        _format_currency(summary.total_converted_myr, "MYR"),
    )
    usd_col.metric(
        "Received",
        _format_currency(summary.total_converted_usd, "USD"),
    )
    rate_col.metric("Average rate", f"{summary.avg_rate:.4f}")

    deposits_col, conversions_col = st.columns(2)
    with deposits_col:
        st.subheader("Deposits")
        st.dataframe(
            [
                {
                    "Date": d.date,
                    "Amount (RM)": float(d.amount_myr),
                    "Reason": d.reason or "",
                }
                for d in summary.deposits
            ],
            width="stretch",
            hide_index=True,
        )
        with st.form("add_deposit", clear_on_submit=True):
            deposit_date = st.date_input("Date", value=date.today())
            amount = st.number_input("Amount (RM)", min_value=0.0, step=1.0)
            reason = st.text_input("Reason")
            if st.form_submit_button("Add deposit"):
                _, _, investments = _mutation_use_cases()
                _report_mutation(
                    "Deposit",
                    investments.add_deposit(
                        DepositInput(
                            date=deposit_date.isoformat(),
                            amount=Decimal(str(amount)),
                            reason=reason,
                        )
                    ),
                )
    with conversions_col:
        st.subheader("Conversions")
        st.dataframe(
            [
                {
                    "Date": c.date,
                    "RM": float(c.amount_myr),
                    "USD": float(c.amount_usd),
                    "Rate": float(c.rate),
                }
                for c in summary.conversions
            ],
            width="stretch",
            hide_index=True,
        )
        with st.form("add_conversion", clear_on_submit=True):
            conversion_date = st.date_input("Date", value=date.today())
            amount_myr = st.number_input("RM", min_value=0.0, step=1.0)
            amount_usd = st.number_input("USD", min_value=0.0, step=1.0)
            rate = st.number_input("Rate", min_value=0.0, step=0.0001)
            if st.form_submit_button("Add conversion"):
                _, _, investments = _mutation_use_cases()
                _report_mutation(
                    "Conversion",
                    investments.add_conversion(
                        ConversionInput(
                            date=conversion_date.isoformat(),
                            amount_myr=Decimal(str(amount_myr)),
                            amount_usd=Decimal(str(amount_usd)),
                            rate=Decimal(str(rate)),
                        )
                    ),
                )


def _render_setup(status: DatabaseStatus) -> None:
    """Render the database status with the bootstrap action."""
    if not status.configured:
        st.warning(
            "Spreadsheet not configured. Set GOOGLE_SERVICE_ACCOUNT_KEY and "
            "SPREADSHEET_ID, then reload."
        )
        return
    if status.initialized:
        st.success("All money manager tabs exist.")
        return
    st.info(f"Missing tabs: {', '.join(status.missing_tabs)}")
    if st.button("Initialize database"):
        settings = build_settings()
        use_case = InitializeDatabaseUseCase(
            sheets_repository=build_sheets_repository(settings),
            sheet_names=settings.sheet_names,
        )
        result = use_case.execute()
        _report_mutation("Initialization", result)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Asset Manager", layout="wide")
    st.title("Asset Manager")

    page = st.sidebar.selectbox(
        "Page",
        ["Money Manager", "Investments", "Cash Flow", "Setup"],
    )
    get_usage_logger().info(f"Page view: {page}")
    if st.sidebar.button("Refresh"):
        st.cache_data.clear()

    if page == "Money Manager":
        _render_money_manager(_load_money_manager())
    elif page == "Investments":
        _render_investments(_load_portfolio())
    elif page == "Cash Flow":
        _render_cash_flow(_load_cash_flow())
    else:
        _render_setup(_fetch_database_status())


if __name__ == "__main__":  # pragma: no cover
    main()
