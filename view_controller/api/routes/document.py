"""API routes for the display tree that controllers render into."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from view_controller.display import NodeSummary, get_document

router = APIRouter(prefix="/document", tags=["document"])


@router.get("", response_model=NodeSummary)
async def get_document_tree():
    """The display tree as nested nodes."""
    return get_document().html.summary()


@router.get("/html", response_class=HTMLResponse)
async def get_document_html():
    """The display tree rendered as HTML."""
    return get_document().to_html()
