import io

import pytest
from PIL import Image, ImageDraw, ImageFont
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_png_bytes() -> bytes:
    """Generate a white PNG with a couple of receipt-like lines."""
    image = Image.new("RGB", (900, 220), color="white")
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default(size=48)
    draw.text((30, 30), "BANANAS 1.20", fill="black", font=font)
    draw.text((30, 120), "BAKED BEANS 0.90", fill="black", font=font)
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF receipt."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "BANANAS 1.20")
    c.save()
    return buf.getvalue()
