"""Tests for the monthly money-flow Sankey module."""

from decimal import Decimal

from asset_manager.adapters.interface.streamlit.monthly_flow_sankey import (
    DEFICIT_LABEL,
    SAVINGS_LABEL,
    SankeyLink,
    build_monthly_flow_model,
    build_plotly_figure,
)
from asset_manager.domain.models import MoneyTransaction


def _tx(day: str, tx_type: str, category: str, amount: str):
    return MoneyTransaction(
        id=f"{day}-{category}",
        date=day,
        type=tx_type,
        category=category,
        amount=Decimal(amount),
    )


TRANSACTIONS = [
    _tx("2024-03-01", "Income", "Salary", "3000"),
    _tx("2024-03-02", "Expense", "Food", "200"),
    _tx("2024-03-05", "Expense", "Rent", "1200"),
    _tx("2024-03-06", "Expense", "Food", "100"),
    _tx("2024-03-07", "Transfer", "", "500"),
    _tx("2024-02-20", "Expense", "Food", "999"),
]


def test_model_links_income_through_month_to_spending():
    model = build_monthly_flow_model(TRANSACTIONS, "2024-03", "Mar 2024")

    assert model.node_labels == [
        "Salary",
        "Mar 2024",
        "Rent",
        "Food",
        SAVINGS_LABEL,
    ]
    assert model.sides == ["L", "M", "R", "R", "R"]
    assert model.links == [
        SankeyLink(source=0, target=1, value=Decimal("3000")),
        SankeyLink(source=1, target=2, value=Decimal("1200")),
        SankeyLink(source=1, target=3, value=Decimal("300")),
        SankeyLink(source=1, target=4, value=Decimal("1500")),
    ]


def test_overspending_adds_deficit_on_the_left():
    transactions = [
        _tx("2024-02-01", "Income", "Salary", "100"),
        _tx("2024-02-02", "Expense", "Food", "250"),
    ]

    model = build_monthly_flow_model(transactions, "2024-02")

    assert model.node_labels[-1] == DEFICIT_LABEL
    assert model.sides[-1] == "L"
    assert model.links[-1] == SankeyLink(
        source=3,
        target=1,
        value=Decimal("150"),
    )
    assert model.node_labels[1] == "2024-02"


def test_empty_month_has_no_links():
    model = build_monthly_flow_model(TRANSACTIONS, "2023-12")

    assert model.is_empty
    assert model.node_labels == ["2023-12"]


def test_build_plotly_figure_places_columns():
    model = build_monthly_flow_model(TRANSACTIONS, "2024-03")

    fig = build_plotly_figure(model)

    sankey = fig.data[0]
    assert list(sankey.node.label) == model.node_labels
    assert list(sankey.node.x) == [0.02, 0.5, 0.98, 0.98, 0.98]
    assert list(sankey.link.value) == [3000.0, 1200.0, 300.0, 1500.0]
