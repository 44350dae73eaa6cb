import pytest

from barchart.adapters.data.static_source import StaticDataSource
from barchart.adapters.dom.document import Document, DocumentProbe
from barchart.adapters.render.svg_target import SvgRenderTarget

SELECTOR = "#barchart"


@pytest.fixture
def document():
    """A page with a 600px chart container and an 800px viewport."""
    doc = Document(viewport_height=800)
    doc.add_element("barchart", width="600px")
    return doc


@pytest.fixture
def probe(document):
    return DocumentProbe(document)


@pytest.fixture
def target(document):
    return SvgRenderTarget(document)


@pytest.fixture
def source():
    return StaticDataSource()
