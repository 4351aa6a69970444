"""ReportLab Thermal Receipt Service Implementation

Renders invoices as narrow PDF pages sized for 58mm / 80mm thermal rolls.
"""

from datetime import datetime
from decimal import Decimal
from io import BytesIO
from typing import List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.receipt_service import ReceiptService
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine
from src.domain.money import format_money

PAPER_WIDTHS = {
    "58mm": 58 * mm,
    "80mm": 80 * mm,
}
MARGIN = 3 * mm
FONT = "Courier"
FONT_BOLD = "Courier-Bold"


class ReportLabReceiptService(ReceiptService):
    """
    ReportLab implementation of ReceiptService

    The page height is computed from the rendered content, so the receipt
    has no trailing blank paper regardless of the number of lines.
    """

    def __init__(
        self,
        business_name: str,
        business_address: str,
        business_phone: str,
        business_rtn: str,
        paper_width: str = "58mm",
        footer: str = "¡Gracias por su preferencia!",
        currency_symbol: str = "L.",
    ):
        if paper_width not in PAPER_WIDTHS:
            raise ValueError(
                f"Unsupported paper width {paper_width!r}, expected one of {sorted(PAPER_WIDTHS)}"
            )
        self.business_name = business_name
        self.business_address = business_address
        self.business_phone = business_phone
        self.business_rtn = business_rtn
        self.paper_width = paper_width
        self.footer = footer
        self.currency_symbol = currency_symbol

    @classmethod
    def from_config(cls, config) -> "ReportLabReceiptService":
        return cls(
            business_name=config.BUSINESS_NAME,
            business_address=config.BUSINESS_ADDRESS,
            business_phone=config.BUSINESS_PHONE,
            business_rtn=config.BUSINESS_RTN,
            paper_width=config.RECEIPT_PAPER_WIDTH,
            footer=config.RECEIPT_FOOTER,
            currency_symbol=config.CURRENCY_SYMBOL,
        )

    def _money(self, amount: Decimal) -> str:
        return f"{self.currency_symbol} {format_money(amount)}"

    def render_receipt(
        self,
        invoice: Invoice,
        invoice_lines: List[InvoiceLine],
        printed_at: Optional[datetime] = None,
    ) -> bytes:
        """
        Render a thermal receipt PDF

        Args:
            invoice: Invoice header with totals
            invoice_lines: Ordered line items of the invoice
            printed_at: Timestamp to print (defaults to invoice.created_at)

        Returns:
            PDF document as bytes
        """
        printed_at = printed_at or invoice.created_at
        page_width = PAPER_WIDTHS[self.paper_width]
        content_width = page_width - 2 * MARGIN
        font_size = 7 if self.paper_width == "58mm" else 8

        styles = getSampleStyleSheet()
        center_style = ParagraphStyle(
            "ReceiptCenter",
            parent=styles["Normal"],
            fontName=FONT,
            fontSize=font_size,
            leading=font_size + 2,
            alignment=TA_CENTER,
        )
        title_style = ParagraphStyle(
            "ReceiptTitle",
            parent=center_style,
            fontName=FONT_BOLD,
            fontSize=font_size + 2,
            leading=font_size + 4,
        )
        normal_style = ParagraphStyle(
            "ReceiptNormal",
            parent=styles["Normal"],
            fontName=FONT,
            fontSize=font_size,
            leading=font_size + 2,
        )
        bold_style = ParagraphStyle(
            "ReceiptBold",
            parent=normal_style,
            fontName=FONT_BOLD,
        )

        def two_columns(rows, bold_last=False, line_above_last=False):
            table = Table(
                rows,
                colWidths=[content_width * 0.6, content_width * 0.4],
            )
            commands = [
                ("FONTNAME", (0, 0), (-1, -1), FONT),
                ("FONTSIZE", (0, 0), (-1, -1), font_size),
                ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("LEFTPADDING", (0, 0), (-1, -1), 0),
                ("RIGHTPADDING", (0, 0), (-1, -1), 0),
                ("TOPPADDING", (0, 0), (-1, -1), 1),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 1),
            ]
            if bold_last:
                commands.append(("FONTNAME", (0, -1), (-1, -1), FONT_BOLD))
            if line_above_last:
                commands.append(("LINEABOVE", (0, -1), (-1, -1), 0.5, colors.black))
            table.setStyle(TableStyle(commands))
            return table

        def separator():
            table = Table([[""]], colWidths=[content_width], rowHeights=[2 * mm])
            table.setStyle(
                TableStyle([("LINEBELOW", (0, 0), (-1, -1), 0.5, colors.black)])
            )
            return table

        elements = []

        # Header - Business identity
        elements.append(Paragraph(escape(self.business_name), title_style))
        elements.append(Paragraph(escape(self.business_address), center_style))
        elements.append(Paragraph(f"Tel: {escape(self.business_phone)}", center_style))
        elements.append(Paragraph(f"RTN: {escape(self.business_rtn)}", center_style))
        elements.append(separator())

        # Invoice details
        elements.append(
            two_columns(
                [
                    ["Factura:", invoice.invoice_number],
                    ["Fecha:", printed_at.strftime("%d/%m/%Y")],
                    ["Hora:", printed_at.strftime("%H:%M:%S")],
                ]
            )
        )
        elements.append(Spacer(1, 1 * mm))
        elements.append(Paragraph(f"Cliente: {escape(invoice.client_name)}", normal_style))
        elements.append(Paragraph(f"RTN: {escape(invoice.client_rtn)}", normal_style))
        elements.append(separator())

        # Line items
        elements.append(Paragraph("SERVICIOS:", bold_style))
        for line in invoice_lines:
            elements.append(
                two_columns(
                    [
                        [
                            Paragraph(escape(line.description), normal_style),
                            format_money(line.line_subtotal),
                        ],
                        [f"{line.quantity} x {self._money(line.unit_price)}", ""],
                    ]
                )
            )
        elements.append(separator())

        # Totals
        rate_percent = (Decimal(invoice.tax_rate) * 100).normalize()
        elements.append(
            two_columns(
                [
                    ["Subtotal Exento:", self._money(invoice.subtotal_exempt)],
                    ["Subtotal Gravado:", self._money(invoice.subtotal_taxable_net)],
                    [f"ISV ({rate_percent:f}%):", self._money(invoice.tax_amount)],
                    ["TOTAL:", self._money(invoice.total)],
                ],
                bold_last=True,
                line_above_last=True,
            )
        )
        elements.append(separator())

        # Footer
        elements.append(Spacer(1, 2 * mm))
        elements.append(Paragraph(escape(self.footer), center_style))

        page_height = 2 * MARGIN + sum(
            element.wrap(content_width, 10000 * mm)[1] for element in elements
        ) + 10 * mm

        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=(page_width, page_height),
            rightMargin=MARGIN,
            leftMargin=MARGIN,
            topMargin=MARGIN,
            bottomMargin=MARGIN,
            title=f"Factura {invoice.invoice_number}",
        )
        doc.build(elements)

        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
