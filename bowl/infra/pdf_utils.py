import io
from typing import Any, Dict, List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from bowl.domain.ShoppingList import ShoppingList, format_amount
from bowl.logic.scheduling.delivery import format_date

SLIPS_PER_PAGE = 3


def generate_shopping_list_pdf(shopping_list: ShoppingList, title: str = "Einkaufsliste"):
    """Checklist table: [ ] / count × portion / ingredient / total / packages."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, rightMargin=40, leftMargin=40, topMargin=40, bottomMargin=40)

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(title, styles["Title"]),
        Paragraph(format_date(shopping_list.delivery_date), styles["Normal"]),
        Spacer(1, 16),
    ]

    if not shopping_list.lines:
        elements.append(Paragraph("Keine Bestellungen für diesen Tag.", styles["Normal"]))
        doc.build(elements)
        return buf.getvalue()

    data = [["", "Menge", "Zutat", "Gesamt", "Packungen"]]
    for line in shopping_list.lines:
        packages = f"{line.packages}× {line.pkg_label}" if line.packages is not None and line.pkg_label else "-"
        data.append([
            "[  ]",
            f"{format_amount(line.count)}× {format_amount(line.portion)}{line.unit}",
            line.name,
            f"{format_amount(line.total)}{line.unit}",
            packages,
        ])

    table = Table(data, repeatRows=1, colWidths=[20, 90, 180, 80, 120])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (4, 1), (4, -1), "Helvetica-Bold"),
        ("ALIGN", (0, 0), (1, -1), "CENTER"),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))
    elements.append(table)
    doc.build(elements)
    return buf.getvalue()


def _slip_cell(slip: Dict[str, Any], styles) -> List[Any]:
    cell = [
        Paragraph(f"<b>{escape(slip['customer'])}</b>", styles["Heading4"]),
        Paragraph(slip.get("delivery_label") or slip["delivery_date"], styles["Normal"]),
    ]
    if slip.get("room"):
        cell.append(Paragraph(f"Raum: {escape(slip['room'])}", styles["Normal"]))
    cell.append(Spacer(1, 6))
    for group in slip["layers"]:
        cell.append(Paragraph(f"<b>{escape(group['layer'])}:</b> {escape(', '.join(group['items']))}", styles["Normal"]))
    if slip.get("allergies"):
        cell.append(Spacer(1, 6))
        cell.append(Paragraph(f"<b>Allergien:</b> {escape(slip['allergies'])}", styles["Normal"]))
    return cell


def generate_order_slips_pdf(slips: List[Dict[str, Any]]):
    """Order slips, SLIPS_PER_PAGE side by side per landscape A4 page, separated by dashed cut lines."""
    buf = io.BytesIO()
    page_size = landscape(A4)
    doc = SimpleDocTemplate(buf, pagesize=page_size, rightMargin=18, leftMargin=18, topMargin=18, bottomMargin=18)
    styles = getSampleStyleSheet()
    elements: List[Any] = []

    if not slips:
        elements.append(Paragraph("Keine Bestellungen für diesen Tag.", styles["Normal"]))
        doc.build(elements)
        return buf.getvalue()

    col_width = (page_size[0] - 36) / SLIPS_PER_PAGE
    for start in range(0, len(slips), SLIPS_PER_PAGE):
        chunk = slips[start:start + SLIPS_PER_PAGE]
        row = [_slip_cell(s, styles) for s in chunk]
        row += [""] * (SLIPS_PER_PAGE - len(row))
        table = Table([row], colWidths=[col_width] * SLIPS_PER_PAGE)
        table.setStyle(TableStyle([
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), 12),
            ("RIGHTPADDING", (0, 0), (-1, -1), 12),
            ("LINEAFTER", (0, 0), (-2, -1), 0.5, colors.grey, "butt", (3, 3)),
        ]))
        elements.append(table)
        if start + SLIPS_PER_PAGE < len(slips):
            elements.append(PageBreak())
    doc.build(elements)
    return buf.getvalue()
