"""
Prompt Browser FastAPI application.

Main entry point for the backend API server. Serves the navigation tree
and resolves category selections to catalog items. Selection state is
owned by the client and sent with every request.
"""

from typing import Optional
from fastapi import FastAPI, Depends, Query, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from prompt_browser.config import settings
from prompt_browser.catalog.models import SelectionEvent, SelectionState
from prompt_browser.catalog.repository import CatalogRepository, CatalogLoadError
from prompt_browser.services.browser import annotate_tree
from prompt_browser.services.response_formatter import format_item_for_view, format_resolution
from prompt_browser.services.selection import apply_event, breadcrumb, initial_selection, resolve
from prompt_browser.services.tree_builder import CategoryTreeCache


# Create FastAPI application
app = FastAPI(
    title="Prompt Browser API",
    description="Category navigation over a fixed catalog of prompts and resources",
    version="0.1.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Navigation tree, built once per loaded catalog
tree_cache = CategoryTreeCache()


async def get_catalog() -> CatalogRepository:
    """
    FastAPI dependency for the loaded catalog.

    The catalog is normally loaded at startup; if that failed, loading is
    retried here and the result kept on app state. Runs on the event loop,
    so concurrent first requests do not load twice.

    Raises:
        HTTPException: If the configured catalog cannot be loaded
    """
    repo = getattr(app.state, "catalog", None)
    if repo is None:
        try:
            repo = CatalogRepository.from_source(settings.CATALOG_PATH)
        except CatalogLoadError as e:
            raise HTTPException(status_code=503, detail=f"Catalog unavailable: {str(e)}")
        app.state.catalog = repo
    return repo


def _selection_payload(repo: CatalogRepository, selection: SelectionState) -> dict:
    item = resolve(repo.get_all(), selection)
    return {
        "selection": selection.model_dump(),
        "breadcrumb": breadcrumb(selection, settings.DEFAULT_BREADCRUMB),
        **format_resolution(item),
    }


# Startup event
@app.on_event("startup")
async def startup_event():
    """Load the catalog and build the navigation tree."""
    print("Loading catalog...")
    try:
        repo = CatalogRepository.from_source(settings.CATALOG_PATH)
    except CatalogLoadError as e:
        app.state.catalog = None
        print(f"Catalog load failed: {str(e)}")
        return
    app.state.catalog = repo
    tree = tree_cache.get(repo.get_all())
    print(f"Catalog ready ({repo.count()} items, {len(tree)} large categories)")


@app.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns basic service status.
    """
    return {
        "status": "healthy",
        "service": "prompt-browser-api",
        "version": "0.1.0"
    }


@app.get("/api/catalog")
async def list_catalog_items(repo: CatalogRepository = Depends(get_catalog)):
    """
    List all catalog items in catalog order.

    Returns:
        Catalog items and total count
    """
    items = repo.get_all()
    return {
        "items": [item.model_dump() for item in items],
        "count": len(items),
    }


@app.get("/api/catalog/tree")
async def get_category_tree(repo: CatalogRepository = Depends(get_catalog)):
    """
    Get the navigation tree (large -> medium -> [small]).

    Key order follows first appearance in the catalog.
    """
    return {"tree": tree_cache.get(repo.get_all())}


@app.get("/api/catalog/items/{item_id}")
async def get_catalog_item(item_id: str, repo: CatalogRepository = Depends(get_catalog)):
    """
    Get a single catalog item formatted for the content pane.

    Raises:
        HTTPException: If the item does not exist
    """
    item = repo.get_by_id(item_id)
    if not item:
        raise HTTPException(status_code=404, detail=f"Catalog item not found: {item_id}")
    return {"item": format_item_for_view(item)}


@app.get("/api/navigation")
async def get_navigation(
    large: Optional[str] = Query(None, description="Selected large category"),
    medium: Optional[str] = Query(None, description="Selected medium category"),
    small: Optional[str] = Query(None, description="Selected small category"),
    repo: CatalogRepository = Depends(get_catalog)
):
    """
    Get the navigation tree annotated for a selection.

    Each node carries selected / expanded / has_children flags.
    """
    selection = SelectionState(selected_large=large, selected_medium=medium, selected_small=small)
    tree = tree_cache.get(repo.get_all())
    return {
        "selection": selection.model_dump(),
        "nodes": annotate_tree(tree, selection),
    }


@app.get("/api/resolve")
async def resolve_selection(
    large: Optional[str] = Query(None, description="Selected large category"),
    medium: Optional[str] = Query(None, description="Selected medium category"),
    small: Optional[str] = Query(None, description="Selected small category"),
    repo: CatalogRepository = Depends(get_catalog)
):
    """
    Resolve an explicit (large, medium, small) selection.

    Returns the resolved item, or item=null with a placeholder message.
    """
    selection = SelectionState(selected_large=large, selected_medium=medium, selected_small=small)
    return _selection_payload(repo, selection)


class SelectionRequest(BaseModel):
    """Request body for a navigation event."""
    selection: SelectionState = SelectionState()
    event: SelectionEvent


@app.post("/api/session/enter")
async def enter_session(repo: CatalogRepository = Depends(get_catalog)):
    """
    Enter the browsing view.

    Returns the initial selection (first catalog item) and its resolved view.
    """
    return _selection_payload(repo, initial_selection(repo.get_all()))


@app.post("/api/selection")
async def update_selection(
    request: SelectionRequest,
    repo: CatalogRepository = Depends(get_catalog)
):
    """
    Apply a navigation event to the client's current selection.

    Selecting a large category clears medium and small; selecting a medium
    category clears small.

    Returns:
        New selection, breadcrumb, and resolved item (or placeholder)
    """
    selection = apply_event(request.selection, request.event)
    return _selection_payload(repo, selection)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.SERVICE_HOST, port=settings.SERVICE_PORT)
