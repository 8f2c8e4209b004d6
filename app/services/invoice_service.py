"""인보이스 서비스 — 주문 인보이스 / 고객 거래 내역 PDF 생성.

Invoice Service — reportlab PDFs: the per-order invoice and the
per-customer transaction report.
"""

from datetime import datetime, timezone
from io import BytesIO
from typing import Any
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.config import settings

NAVY = colors.HexColor("#111827")
GOLD = colors.HexColor("#F9C94D")

# 주문 항목이 없을 때 사용하는 라인 — Line used when an order has no items
FALLBACK_ITEM_NAME = "Premium Footwear Product"


def invoice_number(order_id: str) -> str:
    """인보이스 번호 — "#" + first 8 characters of the order id, upper-cased."""
    return f"#{order_id[:8].upper()}"


def _money(value: float) -> str:
    return f"{value:.2f} {settings.CURRENCY}"


def invoice_lines(order: dict[str, Any]) -> list[list[str]]:
    """인보이스 라인 — [item, qty, unit price, amount] rows."""
    items = order.get("items") or []
    if not items:
        return [[FALLBACK_ITEM_NAME, "1", _money(order["total_price"]), _money(order["total_price"])]]

    rows: list[list[str]] = []
    for line in items:
        quantity = int(line.get("quantity") or 1)
        price = float(line.get("price") or 0)
        name = line.get("name") or FALLBACK_ITEM_NAME
        variant = " / ".join(str(v) for v in (line.get("size"), line.get("color")) if v)
        rows.append([f"{name} ({variant})" if variant else name, str(quantity), _money(price), _money(price * quantity)])
    return rows


def _table_style(header_bg, header_fg) -> TableStyle:
    return TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), header_bg),
        ("TEXTCOLOR", (0, 0), (-1, 0), header_fg),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#F5F5F5")]),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ])


class InvoiceService:
    """PDF 문서 생성 서비스."""

    def __init__(self) -> None:
        styles = getSampleStyleSheet()
        self.styles = styles
        self.brand_style = ParagraphStyle(
            "Brand", parent=styles["Title"], textColor=GOLD, backColor=NAVY, alignment=TA_CENTER,
            fontSize=24, leading=30, borderPadding=(10, 0, 4, 0),
        )
        self.tagline_style = ParagraphStyle(
            "Tagline", parent=styles["Normal"], textColor=colors.white, backColor=NAVY,
            alignment=TA_CENTER, borderPadding=(0, 0, 10, 0),
        )
        self.footer_style = ParagraphStyle(
            "Footer", parent=styles["Italic"], textColor=colors.grey, fontSize=8, alignment=TA_CENTER,
        )

    def build_invoice(self, order: dict[str, Any]) -> bytes:
        """주문 인보이스 PDF를 생성합니다.

        Args:
            order: 정규화된 주문 (Normalized order, see app.utils.revenue.normalize_order)

        Returns:
            bytes: PDF 문서 (PDF document)
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(buffer, pagesize=A4, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36)
        styles = self.styles
        story: list = []

        story.append(Paragraph(f"<b>{settings.STORE_NAME}</b>", self.brand_style))
        story.append(Paragraph(settings.STORE_TAGLINE, self.tagline_style))
        story.append(Spacer(1, 24))

        created_at: datetime | None = order.get("created_at")
        story.append(Paragraph("<b>INVOICE</b>", styles["Heading1"]))

        info = Table(
            [
                [f"Invoice ID: {invoice_number(order['id'])}", "Bill To:"],
                [f"Date: {created_at:%Y-%m-%d}" if created_at else "Date: -", order.get("customer_name") or "N/A"],
                ["", order.get("phone") or ""],
                ["", order.get("address") or ""],
            ],
            colWidths=[260, 260],
        )
        info.setStyle(TableStyle([
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("FONTNAME", (1, 1), (1, 1), "Helvetica-Bold"),
        ]))
        story.append(info)
        story.append(Spacer(1, 18))

        table = Table([["Item", "Quantity", "Unit Price", "Amount"]] + invoice_lines(order), repeatRows=1)
        table.setStyle(_table_style(colors.HexColor("#0A0A0A"), colors.white))
        story.append(table)
        story.append(Spacer(1, 12))

        story.append(Paragraph(f"<b>Total: {_money(order['total_price'])}</b>", styles["Heading3"]))
        story.append(Spacer(1, 36))
        story.append(Paragraph(f"Thank you for choosing {settings.STORE_NAME}. Experience Excellence.", self.footer_style))

        doc.build(story)
        return buffer.getvalue()

    def build_customer_report(self, customer: dict[str, Any], orders: list[dict[str, Any]]) -> bytes:
        """고객 거래 내역 PDF — Customer Transaction Report."""
        buffer = BytesIO()
        doc = SimpleDocTemplate(buffer, pagesize=A4, leftMargin=36, rightMargin=36, topMargin=48, bottomMargin=36)
        styles = self.styles
        story: list = []

        story.append(Paragraph("<b>Customer Transaction Report</b>", styles["Title"]))
        story.append(Paragraph(f"{settings.STORE_NAME.upper()} - {settings.STORE_TAGLINE.upper()}", styles["Italic"]))
        story.append(Spacer(1, 12))

        story.append(Paragraph(f"Customer: {escape(customer['name'])}", styles["Normal"]))
        story.append(Paragraph(f"Phone: {escape(customer['phone'] or 'N/A')}", styles["Normal"]))
        story.append(Paragraph(f"Total Orders: {customer['total_orders']}", styles["Normal"]))
        story.append(Paragraph(f"Total Spent: {_money(customer['total_spent'])}", styles["Normal"]))
        story.append(Paragraph(f"Date Exported: {datetime.now(timezone.utc):%Y-%m-%d}", styles["Normal"]))
        story.append(Spacer(1, 12))

        rows = [
            [
                f"{o['created_at']:%Y-%m-%d}" if o["created_at"] else "",
                f"#{(o['id'] or '')[:8]}",
                o["status"],
                o["payment_status"].upper(),
                _money(o["total_price"]),
            ]
            for o in orders
        ]
        table = Table([["Date", "Order ID", "Status", "Payment", "Amount"]] + rows, repeatRows=1)
        table.setStyle(_table_style(colors.HexColor("#001F3F"), colors.HexColor("#D4AF37")))
        story.append(table)

        doc.build(story)
        return buffer.getvalue()


# 싱글턴 인스턴스 — Singleton instance
invoice_service: InvoiceService = InvoiceService()
