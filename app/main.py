import logging
from contextlib import asynccontextmanager

from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from app.config import settings
from app.engine import analyze_sales_data
from app.errors import SalesAnalyticsError
from app.store import store
from app.strategies import AnalysisOptions

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SEED_ON_STARTUP:
        from scripts.seed_data import seed
        seed(store)
        logger.info("Seeded store with %d receipts", len(store.receipts))
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Per-seller revenue, profit, top products and bonus report",
    lifespan=lifespan,
)


def _options() -> AnalysisOptions:
    return AnalysisOptions(top_products_limit=settings.TOP_PRODUCTS_LIMIT)


@app.exception_handler(SalesAnalyticsError)
async def sales_analytics_error_handler(request: Request, exc: SalesAnalyticsError):
    logger.warning("Rejected sales data: %s", exc)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def _report(data) -> list[dict]:
    return [r.model_dump() for r in analyze_sales_data(data, _options())]


# ── Catalog ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/sellers", summary="List all sellers")
def list_sellers():
    return {"sellers": [s.model_dump() for s in store.list_sellers()]}


@app.get("/api/v1/sellers/{seller_id}", summary="Get seller details")
def get_seller(seller_id: str):
    seller = store.get_seller(seller_id)
    if not seller:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    return seller.model_dump()


@app.get("/api/v1/products", summary="List all products")
def list_products():
    return {"products": [p.model_dump() for p in store.list_products()]}


@app.get("/api/v1/products/{sku}", summary="Get product details")
def get_product(sku: str):
    product = store.get_product(sku)
    if not product:
        raise HTTPException(404, f"Product '{sku}' not found")
    return product.model_dump()


# ── Reports ──────────────────────────────────────────────────────────────────

@app.post("/api/v1/reports/sales", summary="Build a seller report for the posted dataset")
def post_sales_report(payload: dict = Body(...)):
    return {"sellers": _report(payload)}


@app.get("/api/v1/reports/sales", summary="Build a seller report for the stored dataset")
def get_sales_report():
    return {"sellers": _report(store.as_sales_data())}


@app.get("/api/v1/reports/sales/{seller_id}", summary="Report row for one seller")
def get_seller_report(seller_id: str):
    for row in _report(store.as_sales_data()):
        if row["seller_id"] == seller_id:
            return row
    raise HTTPException(404, f"No sales found for seller '{seller_id}'")


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.post("/api/v1/admin/seed", summary="Re-seed demo data")
def reseed():
    from scripts.seed_data import seed
    store.clear()
    seed(store)
    return {
        "status": "seeded",
        "sellers": len(store.sellers),
        "products": len(store.products),
        "receipts": len(store.receipts),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000)
