# =============================================================================
# core/services/pdf_service.py - Contract PDF Export
# =============================================================================
# Renders a contract to PDF with ReportLab's platypus layout engine:
#
#   Wedding Vendor Contract
#   Contract Details   (ID, client, date, venue, package, amount, status)
#   Contract Terms     (rich text content as plain paragraphs)
#   Digital Signature  (signed contracts only: image or typed name)
#   footer             "Generated on <date> - Page i of n" on every page
#
# Usage:
#   from core.services.pdf_service import PdfService
#   pdf_bytes = PdfService.render_contract(contract)
# =============================================================================

import io
import logging
from datetime import datetime
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.platypus import Image, KeepTogether, Paragraph, SimpleDocTemplate, Spacer

from app.exceptions import PdfExportError
from core.models.contract import Contract, SignatureType
from lib.formatting import (
    format_currency,
    format_long_date,
    format_short_date,
    format_timestamp,
    slugify_client_name,
)
from lib.html_text import html_to_paragraphs
from lib.signatures import SignatureError, flatten_on_white, load_signature_image

logger = logging.getLogger(__name__)

PAGE_MARGIN = 20 * mm
SIGNATURE_MAX_WIDTH = 100 * mm
SIGNATURE_MAX_HEIGHT = 30 * mm


def _numbered_canvas(generated_on: str):
    """
    Canvas class that stamps "Page i of n" footers.

    The page total is only known once every page has been laid out, so
    page states are buffered and the footers drawn in save().
    """

    class NumberedCanvas(canvas.Canvas):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self._saved_page_states = []

        def showPage(self):
            self._saved_page_states.append(dict(self.__dict__))
            self._startPage()

        def save(self):
            total = len(self._saved_page_states)
            for state in self._saved_page_states:
                self.__dict__.update(state)
                self._draw_footer(total)
                super().showPage()
            super().save()

        def _draw_footer(self, total: int):
            self.saveState()
            self.setFont("Helvetica", 8)
            self.setFillColor(colors.grey)
            self.drawString(
                PAGE_MARGIN,
                10 * mm,
                f"Generated on {generated_on} - Page {self.getPageNumber()} of {total}",
            )
            self.restoreState()

    return NumberedCanvas


class PdfService:
    """
    Service for exporting contracts as PDF documents.
    """

    @staticmethod
    def filename_for(contract: Contract) -> str:
        """
        Download filename for a contract.

        Example:
            "contract-emma-wilson-contract_1718000000000_ab12cd34.pdf"
        """
        return f"contract-{slugify_client_name(contract.client_name)}-{contract.id}.pdf"

    @staticmethod
    def render_contract(contract: Contract, generated_at: datetime | None = None) -> bytes:
        """
        Render a contract to PDF bytes.

        Args:
            contract: The contract to export
            generated_at: Timestamp for the footer (defaults to now)

        Returns:
            PDF document bytes

        Raises:
            PdfExportError: If ReportLab fails to build the document
        """
        generated_on = format_short_date(generated_at or datetime.now())
        buf = io.BytesIO()

        doc = SimpleDocTemplate(
            buf,
            pagesize=A4,
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            title=f"Contract - {contract.client_name}",
            author="Wedding Vendor Contracts",
        )

        try:
            doc.build(
                PdfService._build_story(contract),
                canvasmaker=_numbered_canvas(generated_on),
            )
        except Exception as e:
            logger.error(f"Failed to render PDF for contract {contract.id}: {e}")
            raise PdfExportError(contract.id, str(e))

        pdf_bytes = buf.getvalue()
        logger.info(f"Rendered PDF for contract {contract.id} ({len(pdf_bytes)} bytes)")
        return pdf_bytes

    # -------------------------------------------------------------------------
    # Story Building
    # -------------------------------------------------------------------------

    @staticmethod
    def _styles() -> dict[str, ParagraphStyle]:
        sample = getSampleStyleSheet()
        return {
            "title": ParagraphStyle("ContractTitle", parent=sample["Title"], fontSize=20, alignment=0),
            "heading": ParagraphStyle("ContractHeading", parent=sample["Heading2"], fontSize=14),
            "body": ParagraphStyle("ContractBody", parent=sample["Normal"], fontSize=10, leading=14),
            "typed_signature": ParagraphStyle(
                "TypedSignature",
                parent=sample["Normal"],
                fontName="Helvetica-Oblique",
                fontSize=16,
                leading=20,
            ),
        }

    @staticmethod
    def _build_story(contract: Contract) -> list:
        styles = PdfService._styles()
        body = styles["body"]
        story = [
            Paragraph("Wedding Vendor Contract", styles["title"]),
            Spacer(1, 6 * mm),
            Paragraph("Contract Details", styles["heading"]),
        ]

        details = [
            ("Contract ID", contract.id),
            ("Client Name", contract.client_name),
            ("Event Date", PdfService._event_date_label(contract.event_date)),
            ("Event Venue", contract.event_venue),
            ("Service Package", contract.service_package),
            ("Amount", format_currency(contract.amount)),
            ("Status", contract.status.value.capitalize()),
        ]
        for label, value in details:
            story.append(Paragraph(f"{label}: {escape(value)}", body))
        story.append(Spacer(1, 8 * mm))

        story.append(Paragraph("Contract Terms", styles["heading"]))
        for paragraph in html_to_paragraphs(contract.content):
            story.append(Paragraph(escape(paragraph), body))
            story.append(Spacer(1, 2 * mm))

        if contract.is_signed and contract.signature:
            story.append(Spacer(1, 10 * mm))
            story.append(KeepTogether(PdfService._signature_block(contract, styles)))

        return story

    @staticmethod
    def _signature_block(contract: Contract, styles: dict[str, ParagraphStyle]) -> list:
        signature = contract.signature
        body = styles["body"]
        block = [
            Paragraph("Digital Signature", styles["heading"]),
            Paragraph(f"Signed on: {escape(PdfService._signed_on_label(signature.timestamp))}", body),
            Paragraph(f"Signature Type: {signature.type_label}", body),
            Spacer(1, 5 * mm),
        ]

        if signature.type == SignatureType.DRAWN:
            image = PdfService._signature_image(signature.data)
            if image is not None:
                block.append(image)
            else:
                block.append(Paragraph("Signature: [Digital signature applied]", body))
        else:
            block.append(Paragraph(escape(signature.data), styles["typed_signature"]))

        return block

    @staticmethod
    def _signature_image(data_url: str) -> Image | None:
        """
        Build a platypus Image for a drawn signature, scaled into the
        signature box with its aspect ratio kept.

        Returns None when the stored data cannot be decoded.
        """
        try:
            pil_image = flatten_on_white(load_signature_image(data_url))
        except SignatureError as e:
            logger.warning(f"Could not add signature image to PDF: {e.message}")
            return None

        scale = min(SIGNATURE_MAX_WIDTH / pil_image.width, SIGNATURE_MAX_HEIGHT / pil_image.height)
        png = io.BytesIO()
        pil_image.save(png, format="PNG")
        png.seek(0)

        image = Image(png, width=pil_image.width * scale, height=pil_image.height * scale)
        image.hAlign = "LEFT"
        return image

    @staticmethod
    def _event_date_label(event_date: str) -> str:
        try:
            return format_long_date(event_date)
        except ValueError:
            return event_date

    @staticmethod
    def _signed_on_label(timestamp: str) -> str:
        try:
            return format_timestamp(timestamp, long_month=True)
        except ValueError:
            return timestamp
