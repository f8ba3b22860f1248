# loader.py - read/write catalog snapshots as JSON
#
# Snapshot layout:
#   {"categories": [...], "keywords": [...], "products": [...]}
# Records use the catalog database's camelCase field names.

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from .models import Catalog, CatalogError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_catalog(path: PathLike) -> Catalog:
    """
    Load a catalog snapshot.
    A missing file is not an error: it gives an empty Catalog (cold start).
    Raises CatalogError for unreadable or non-UTF-8 files, invalid JSON and
    malformed records.
    """
    p = Path(path)
    if not p.exists():
        logger.warning("catalog file %s not found; starting with an empty catalog", p)
        return Catalog()
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogError(f"{p}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise CatalogError(f"{p}: not UTF-8 text ({e})") from e
    except OSError as e:
        raise CatalogError(f"{p}: unreadable ({e})") from e

    catalog = Catalog.from_dict(data)
    counts = catalog.counts()
    logger.info(
        "loaded %d categories, %d keywords, %d products from %s",
        counts["categories"], counts["keywords"], counts["products"], p,
    )
    return catalog


def save_catalog(catalog: Catalog, path: PathLike) -> None:
    """Write `catalog` in the same layout load_catalog() reads."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "categories": [
            {"id": c.id, "name": c.name, "classification": c.classification, "priority": c.priority}
            for c in catalog.categories
        ],
        "keywords": [{"keyword": k.term, "categoryId": k.category_id} for k in catalog.keywords],
        "products": [
            {
                "id": pr.id,
                "productName": pr.name,
                "categoryId": pr.category_id,
                "isOfficial": pr.is_official,
                "searchKeywords": list(pr.search_terms),
            }
            for pr in catalog.products
        ],
    }
    with p.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    logger.info("saved catalog snapshot to %s", p)
