import logging

from fastapi import FastAPI

from storefront.api.booking import router as booking_router
from storefront.api.cart import router as cart_router
from storefront.api.catalog import router as catalog_router
from storefront.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("flow_id", "offering_id", "status", "item_id", "label", "error", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=settings.BUSINESS_NAME, version="1.0.0")

app.include_router(catalog_router, tags=["catalog"])
app.include_router(booking_router, tags=["booking"])
app.include_router(cart_router, tags=["cart"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
