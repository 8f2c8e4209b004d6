"""리포트 서비스 — 주문/고객/대시보드 Excel 내보내기.

Report Service — Excel exports of orders, customers and the dashboard.
Every workbook shares the same header style (bold white on dark fill).
"""

from datetime import datetime
from io import BytesIO
from typing import Any, Iterable

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.worksheet.worksheet import Worksheet

from app.config import settings

ORDER_HEADERS: list[str] = [
    "Order ID", "Date", "Customer", "Phone", "Address", "Items",
    f"Total ({settings.CURRENCY})", "Status", "Payment",
]
ORDER_WIDTHS: list[int] = [12, 18, 22, 16, 36, 8, 14, 12, 10]

CUSTOMER_HEADERS: list[str] = ["Name", "Phone", "Total Orders", "Total Spent", "Payment", "Last Order"]
CUSTOMER_WIDTHS: list[int] = [24, 16, 14, 14, 10, 14]

header_font = Font(bold=True, color="FFFFFF", size=11)
header_fill = PatternFill(start_color="2D3436", end_color="2D3436", fill_type="solid")


def style_headers(ws: Worksheet, headers: list[str], widths: list[int] | None = None) -> None:
    for col_idx, h in enumerate(headers, 1):
        cell = ws.cell(row=1, column=col_idx, value=h)
        cell.font = header_font
        cell.fill = header_fill
        cell.alignment = Alignment(horizontal="center")
    for i, w in enumerate(widths or [], 1):
        ws.column_dimensions[ws.cell(row=1, column=i).column_letter].width = w


def _date_text(value: datetime | None, fmt: str = "%Y-%m-%d %H:%M") -> str:
    return value.strftime(fmt) if value else ""


def _order_row(order: dict[str, Any]) -> list[Any]:
    return [
        (order["id"] or "")[:8].upper(),
        _date_text(order["created_at"]),
        order["customer_name"],
        order["phone"] or "",
        order["address"] or "",
        sum(int(line.get("quantity") or 0) for line in order["items"]),
        order["total_price"],
        order["status"],
        order["payment_status"].capitalize(),
    ]


def _to_bytes(wb: Workbook) -> bytes:
    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


class ReportService:
    """Excel 리포트 생성 서비스 — input is already-normalized orders / customers."""

    def export_orders(self, orders: Iterable[dict[str, Any]]) -> bytes:
        """주문 목록을 "Orders" 시트로 내보냅니다."""
        wb = Workbook()
        ws = wb.active
        ws.title = "Orders"
        style_headers(ws, ORDER_HEADERS, ORDER_WIDTHS)
        for order in orders:
            ws.append(_order_row(order))
        return _to_bytes(wb)

    def export_customers(self, customers: Iterable[dict[str, Any]]) -> bytes:
        """고객 목록을 "Customers" 시트로 내보냅니다.

        Columns: Name, Phone, Total Orders, Total Spent, Payment (Paid/Unpaid),
        Last Order (date only).
        """
        wb = Workbook()
        ws = wb.active
        ws.title = "Customers"
        style_headers(ws, CUSTOMER_HEADERS, CUSTOMER_WIDTHS)
        for c in customers:
            ws.append([
                c["name"],
                c["phone"],
                c["total_orders"],
                c["total_spent"],
                "Paid" if c["is_paid"] else "Unpaid",
                _date_text(c["last_order"], "%Y-%m-%d"),
            ])
        return _to_bytes(wb)

    def export_dashboard(
        self,
        stats: dict[str, Any],
        sales: list[dict[str, Any]],
    ) -> bytes:
        """대시보드 데이터를 Excel 파일로 내보내기.

        Sheets: Summary (KPIs), Daily Sales (chart series), Orders.

        Args:
            stats: DashboardService.get_dashboard_stats() 결과 (Dashboard stats)
            sales: 일자별 매출 (Sales chart series)
        """
        wb = Workbook()

        # --- Sheet 1: Summary ---
        ws1 = wb.active
        ws1.title = "Summary"
        style_headers(ws1, ["Metric", "Value"], [22, 16])
        ws1.append(["Total Sales", stats["total_sales"]])
        ws1.append(["Total Orders", stats["total_orders"]])
        ws1.append(["Total Products", stats["total_products"]])
        ws1.append(["Pending Orders", stats["pending_orders"]])
        ws1.append(["Estimated Profit", stats["total_profit"]])
        ws1.append(["Currency", settings.CURRENCY])

        # --- Sheet 2: Daily Sales ---
        ws2 = wb.create_sheet("Daily Sales")
        style_headers(ws2, ["Date", f"Sales ({settings.CURRENCY})"], [12, 16])
        for point in sales:
            ws2.append([point["date"], point["sales"]])

        # --- Sheet 3: Orders ---
        ws3 = wb.create_sheet("Orders")
        style_headers(ws3, ORDER_HEADERS, ORDER_WIDTHS)
        for order in stats["orders"]:
            ws3.append(_order_row(order))

        return _to_bytes(wb)


# 싱글턴 인스턴스 — Singleton instance
report_service: ReportService = ReportService()
