import logging
from functools import lru_cache
from fastapi import FastAPI, HTTPException, Query
import time
from fastapi.middleware.cors import CORSMiddleware
from schemas import *
from FtsQuery import FtsQuery

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("fts_query_api")

MAX_QUERY_LENGTH = 2000

app = FastAPI(title="Full-text search query API", description="Converts Google-style search phrases to SQL Server full-text search conditions")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

default_settings = FtsQuerySettings(add_standard_stop_words=True)

# Settings are frozen, so equal settings share one FtsQuery
@lru_cache(maxsize=32)
def get_transformer(settings: FtsQuerySettings) -> FtsQuery:
    return FtsQuery(settings)

def check_length(query: str):
    if len(query) > MAX_QUERY_LENGTH:
        raise HTTPException(status_code=400, detail=f"Query is longer than {MAX_QUERY_LENGTH} characters")

def run_transform(query: str, settings: FtsQuerySettings):
    check_length(query)
    condition = get_transformer(settings).transform(query)
    logger.info("Transformed %r -> %r", query, condition)
    return {
        "query": query,
        "condition": condition,
        "empty": not condition,
        "settings": settings
    }

@app.get("/")
async def get_root():
    return {"message": "Full-text search query API", "time": time.time()}

@app.post("/transform", response_model=TransformResponse)
async def transform(request: TransformRequest):
    return run_transform(request.query, request.settings or default_settings)

@app.get("/transform", response_model=TransformResponse)
async def transform_query(q: str = Query("", description="Search phrase to convert")):
    return run_transform(q, default_settings)

@app.get("/stopwords", response_model=StopWordsResponse)
async def get_stop_words():
    stop_words = get_transformer(default_settings).stop_words
    return {"stop_words": sorted(stop_words), "total": len(stop_words)}
