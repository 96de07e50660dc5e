"""Monthly money-flow Sankey presentation logic for the Streamlit UI.

Pure transformations from ledger transactions to a Sankey model and a Plotly
figure. The layout has three columns:
    income categories -> month -> expense categories
with a ``Savings`` node on the right when income exceeds spending, or a
``Deficit`` node on the left when spending exceeds income. Transfers move
money between accounts and are left out.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Literal

from asset_manager.domain.models import MoneyTransaction, TransactionType

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


SAVINGS_LABEL = "Savings"
DEFICIT_LABEL = "Deficit"


@dataclass(frozen=True)
class SankeyLink:
    """Sankey link edge."""

    source: int
    target: int
    value: Decimal


@dataclass(frozen=True)
class SankeyModel:
    """Node labels, column sides and links with stable indices."""

    node_labels: list[str]
    sides: list[Literal["L", "M", "R"]]
    links: list[SankeyLink]

    @property
    def is_empty(self) -> bool:
        return not self.links


def _totals_by_category(
    transactions: Sequence[MoneyTransaction],
    tx_type: TransactionType,
) -> list[tuple[str, Decimal]]:
    totals: dict[str, Decimal] = {}
    for tx in transactions:
        if tx.transaction_type != tx_type or tx.amount <= 0:
            continue
        totals[tx.category] = totals.get(tx.category, Decimal("0")) + tx.amount
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def build_monthly_flow_model(
    transactions: Sequence[MoneyTransaction],
    month: str,
    month_label: str | None = None,
) -> SankeyModel:
    """Build the Sankey model for one calendar month.

    Args:
        transactions: Ledger transactions with ISO ``YYYY-MM-DD`` dates.
        month: Month to keep, as ``YYYY-MM``.
        month_label: Label of the middle node; defaults to ``month``.

    Returns:
        SankeyModel: Model with income on the left and spending on the right.
    """
    in_month = [tx for tx in transactions if tx.date[:7] == month]
    incoming = _totals_by_category(in_month, TransactionType.INCOME)
    outgoing = _totals_by_category(in_month, TransactionType.EXPENSE)

    labels: list[str] = []
    sides: list[Literal["L", "M", "R"]] = []
    links: list[SankeyLink] = []

    def _add(label: str, side: Literal["L", "M", "R"]) -> int:
        labels.append(label)
        sides.append(side)
        return len(labels) - 1

    left = [(_add(name, "L"), amount) for name, amount in incoming]
    middle = _add(month_label or month, "M")
    right = [(_add(name, "R"), amount) for name, amount in outgoing]

    for index, amount in left:
        links.append(SankeyLink(source=index, target=middle, value=amount))
    for index, amount in right:
        links.append(SankeyLink(source=middle, target=index, value=amount))

    total_in = sum((amount for _, amount in incoming), start=Decimal("0"))
    total_out = sum((amount for _, amount in outgoing), start=Decimal("0"))
    diff = total_in - total_out
    if diff > 0:
        savings = _add(SAVINGS_LABEL, "R")
        links.append(SankeyLink(source=middle, target=savings, value=diff))
    elif diff < 0:
        deficit = _add(DEFICIT_LABEL, "L")
        links.append(SankeyLink(source=deficit, target=middle, value=-diff))

    return SankeyModel(node_labels=labels, sides=sides, links=links)


def _column_positions(sides: Sequence[str]) -> tuple[list[float], list[float]]:
    counts = {side: sides.count(side) for side in ("L", "M", "R")}
    seen = {"L": 0, "M": 0, "R": 0}
    x_by_side = {"L": 0.02, "M": 0.5, "R": 0.98}
    node_x: list[float] = []
    node_y: list[float] = []
    for side in sides:
        seen[side] += 1
        node_x.append(x_by_side[side])
        node_y.append(seen[side] / (counts[side] + 1))
    return node_x, node_y


def build_plotly_figure(model: SankeyModel) -> "go.Figure":
    """Build a Plotly Sankey figure from a Sankey model.

    Args:
        model: Precomputed Sankey model.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    import plotly.graph_objects as go

    node_x, node_y = _column_positions(model.sides)
    fig = go.Figure(
        data=[
            go.Sankey(
                arrangement="snap",
                node=dict(
                    pad=10,
                    thickness=12,
                    label=model.node_labels,
                    x=node_x,
                    y=node_y,
                    line=dict(color="rgba(0,0,0,0.25)", width=0.5),
                ),
                link=dict(
                    source=[link.source for link in model.links],
                    target=[link.target for link in model.links],
                    value=[float(link.value) for link in model.links],
                ),
                textfont=dict(size=12),
            )
        ]
    )
    fig.update_layout(margin=dict(l=8, r=8, t=8, b=8), height=420)
    return fig


__all__ = [
    "DEFICIT_LABEL",
    "SAVINGS_LABEL",
    "SankeyLink",
    "SankeyModel",
    "build_monthly_flow_model",
    "build_plotly_figure",
]
