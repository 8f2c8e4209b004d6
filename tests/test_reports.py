"""리포트 테스트 — Excel 내보내기, 인보이스/고객 거래 내역 PDF.

Report tests — Excel exports plus the invoice and customer report PDFs.
"""

from datetime import datetime
from io import BytesIO

from httpx import AsyncClient
from openpyxl import load_workbook

from app.services.invoice_service import FALLBACK_ITEM_NAME, invoice_lines, invoice_number
from app.services.report_service import report_service
from app.utils.revenue import normalize_order
from tests.conftest import make_order, session_header

ADMIN = "/api/v1/admin"


def sample_order(**overrides) -> dict:
    data = {
        "id": "a1b2c3d4-0000-4000-8000-000000000000",
        "customer_name": "Amira",
        "phone": "22123456",
        "address": "12 Rue de Marseille, Tunis, Tunis",
        "total_price": 640.0,
        "items": [{"name": "Classic Loafer", "price": 320.0, "quantity": 2, "size": 41, "color": "Black"}],
        "created_at": datetime(2026, 3, 1, 10, 30),
    }
    data.update(overrides)
    return normalize_order(data)


class TestExcelExports:
    """Excel 내보내기."""

    def test_export_orders_rows(self):
        wb = load_workbook(BytesIO(report_service.export_orders([sample_order()])))
        ws = wb["Orders"]
        assert ws["A1"].value == "Order ID"
        assert ws["G1"].value == "Total (TND)"
        assert ws["A2"].value == "A1B2C3D4"
        assert ws["B2"].value == "2026-03-01 10:30"
        assert ws["F2"].value == 2
        assert ws["I2"].value == "Unpaid"
        assert ws["A1"].font.bold

    def test_export_dashboard_sheets(self):
        stats = {
            "total_sales": 640.0,
            "total_orders": 1,
            "total_products": 3,
            "pending_orders": 1,
            "total_profit": 192.0,
            "orders": [sample_order()],
        }
        wb = load_workbook(BytesIO(report_service.export_dashboard(stats, [{"date": "Mar 1", "sales": 640.0}])))
        assert wb.sheetnames == ["Summary", "Daily Sales", "Orders"]
        assert wb["Summary"]["B2"].value == 640.0
        assert wb["Daily Sales"]["A2"].value == "Mar 1"
        assert wb["Orders"].max_row == 2

    async def test_orders_export_endpoint(self, client: AsyncClient, db, admin_token):
        await make_order(db)
        res = await client.get(f"{ADMIN}/orders/export", headers=session_header(admin_token))
        assert res.status_code == 200
        assert "LuxeShopy_Orders.xlsx" in res.headers["content-disposition"]
        assert load_workbook(BytesIO(res.content))["Orders"].max_row == 2

    async def test_customers_export_endpoint(self, client: AsyncClient, db, admin_token):
        await make_order(db, customer_name="Amira", payment_status="paid")
        res = await client.get(f"{ADMIN}/customers/export", headers=session_header(admin_token))
        ws = load_workbook(BytesIO(res.content))["Customers"]
        assert [c.value for c in ws[1]] == ["Name", "Phone", "Total Orders", "Total Spent", "Payment", "Last Order"]
        assert ws["A2"].value == "Amira"
        assert ws["E2"].value == "Paid"

    async def test_dashboard_export_endpoint(self, client: AsyncClient, admin_token):
        res = await client.get(f"{ADMIN}/dashboard/export", headers=session_header(admin_token))
        assert res.status_code == 200
        assert load_workbook(BytesIO(res.content)).sheetnames == ["Summary", "Daily Sales", "Orders"]


class TestInvoice:
    """인보이스 PDF."""

    def test_invoice_number(self):
        assert invoice_number("a1b2c3d4-0000") == "#A1B2C3D4"

    def test_lines_from_items(self):
        rows = invoice_lines(sample_order())
        assert rows == [["Classic Loafer (41 / Black)", "2", "320.00 TND", "640.00 TND"]]

    def test_fallback_line_without_items(self):
        """항목이 없으면 기본 상품명 한 줄."""
        rows = invoice_lines(sample_order(items=[], total_price=99.5))
        assert rows == [[FALLBACK_ITEM_NAME, "1", "99.50 TND", "99.50 TND"]]

    async def test_invoice_endpoint(self, client: AsyncClient, db, admin_token):
        order = await make_order(db)
        res = await client.get(f"{ADMIN}/invoices/{order.id}", headers=session_header(admin_token))
        assert res.status_code == 200
        assert res.headers["content-type"] == "application/pdf"
        assert res.content.startswith(b"%PDF")
        assert f"Invoice_{str(order.id)[:8]}.pdf" in res.headers["content-disposition"]

    async def test_invoice_unknown_order_404(self, client: AsyncClient, admin_token):
        res = await client.get(
            f"{ADMIN}/invoices/6f1c2a52-8c3e-4d36-9b7c-1d2e3f4a5b6c",
            headers=session_header(admin_token),
        )
        assert res.status_code == 404


class TestCustomerReport:
    """고객 거래 내역 PDF."""

    async def test_customer_report_pdf(self, client: AsyncClient, db, admin_token):
        await make_order(db, customer_name="Amira <Ben> Salah", phone="22123456")
        res = await client.get(f"{ADMIN}/customers/22123456/report", headers=session_header(admin_token))
        assert res.status_code == 200
        assert res.content.startswith(b"%PDF")
        assert 'filename="Amira_Ben_Salah_Report.pdf"' in res.headers["content-disposition"]

    async def test_customer_report_non_latin_name(self, client: AsyncClient, db, admin_token):
        """아랍어 이름 — ASCII 대체 이름과 UTF-8 filename*."""
        await make_order(db, customer_name="محمد الطرابلسي", phone="22999888")
        res = await client.get(f"{ADMIN}/customers/22999888/report", headers=session_header(admin_token))
        assert res.status_code == 200
        assert res.content.startswith(b"%PDF")
        disposition = res.headers["content-disposition"]
        assert 'filename="Customer_Report.pdf"' in disposition
        assert "filename*=UTF-8''%D9%85%D8%AD%D9%85%D8%AF_" in disposition
