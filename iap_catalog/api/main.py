"""
FastAPI application - exposes the in-app purchase product catalog over HTTP
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from iap_catalog.catalog.client import ProductCatalogClient
from iap_catalog.dependencies import build_catalog_client
from iap_catalog.integrations.contracts.results import ErrorKind, FetchFailure
from iap_catalog.utils.config_loader import load_catalog_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="IAP Product Catalog API",
    description="Resolves configured in-app purchase product identifiers against the store",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_FAILURE_STATUS = {
    ErrorKind.NO_PRODUCT_IDS_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.NO_PRODUCTS_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.PRODUCT_REQUEST_FAILED: status.HTTP_502_BAD_GATEWAY,
}


@lru_cache(maxsize=1)
def get_catalog_client() -> ProductCatalogClient:
    return build_catalog_client(load_catalog_config())


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/api/v1/products")
async def list_products(client: ProductCatalogClient = Depends(get_catalog_client)):
    result = await client.fetch_products()
    if isinstance(result, FetchFailure):
        logger.warning("Product catalog request failed: %s", result.error.value)
        return JSONResponse(
            status_code=_FAILURE_STATUS.get(result.error, status.HTTP_500_INTERNAL_SERVER_ERROR),
            content={"error": result.error.value, "message": result.message},
        )
    return {"products": [product.model_dump(exclude_none=True) for product in result.products]}
