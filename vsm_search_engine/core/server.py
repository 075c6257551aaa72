# vsm_search_engine/core/server.py

import time
from typing import List, Optional
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from vsm_search_engine import config
from vsm_search_engine.data_processing import CorpusLoader, ConfigurationError
from vsm_search_engine.retrieval_models import VectorSpaceModel
from .main import build_search_engine


class SearchComponents:
    def __init__(self, loader: CorpusLoader, vsm_model: VectorSpaceModel):
        self.loader = loader
        self.vsm_model = vsm_model


global_search_components: Optional[SearchComponents] = None

app = FastAPI(
    title="TF-IDF Search Engine API",
    description="Ranks the documents of a fixed corpus against free-text queries using TF-IDF weights and cosine similarity.",
    version="1.0.0",
)


@app.on_event("startup")
async def startup_event():
    global global_search_components

    if global_search_components is not None:
        return

    print("--- Starting TF-IDF Search Engine Server ---")
    try:
        loader, vsm_model = build_search_engine(config.CORPUS_DIR, config.STOPWORDS_PATH, config.STOPWORDS_LANGUAGE)
    except ConfigurationError as e:
        print(f"Error: {e}. Server will answer 503 until restarted with a valid configuration.")
        return

    global_search_components = SearchComponents(loader, vsm_model)
    print(f"Index ready: {vsm_model.total_documents} documents, {vsm_model.vocabulary_size()} terms.")


def get_components() -> SearchComponents:
    if global_search_components is None:
        raise HTTPException(status_code=503, detail="Search index not initialized.")
    return global_search_components


# --- API Models for Request/Response ---

class IndexInfo(BaseModel):
    num_documents: int
    vocabulary_size: int

class SearchRequest(BaseModel):
    query: str
    top_k: int = config.TOP_K

class SearchResult(BaseModel):
    doc_id: str
    score: float

class SearchResponseModel(BaseModel):
    query_terms: List[str]
    results: List[SearchResult]

class FullDocumentResponse(BaseModel):
    doc_id: str
    text: str

# --- API Endpoints ---

@app.get("/")
async def read_root():
    return {"message": "Welcome to the TF-IDF Search Engine API!"}

@app.get("/index", response_model=IndexInfo)
async def get_index_info():
    components = get_components()
    return IndexInfo(
        num_documents=components.vsm_model.total_documents,
        vocabulary_size=components.vsm_model.vocabulary_size(),
    )

@app.post("/search", response_model=SearchResponseModel)
async def search(request: SearchRequest):
    components = get_components()

    if not request.query.strip():
        raise HTTPException(status_code=400, detail="Query cannot be empty.")
    if request.top_k < 1:
        raise HTTPException(status_code=400, detail="top_k must be at least 1.")

    print(f"Search: '{request.query}', Top K: {request.top_k}")
    start_time_search = time.time()
    response = components.vsm_model.rank(request.query)
    print(f"Search completed in {time.time() - start_time_search:.4f} seconds.")

    return SearchResponseModel(
        query_terms=response.query_terms,
        results=[SearchResult(doc_id=doc_id, score=score) for doc_id, score in response.results[:request.top_k]],
    )

@app.get("/document", response_model=FullDocumentResponse)
async def get_document_text(doc_id: str):
    components = get_components()

    if not components.vsm_model.has_document(doc_id):
        raise HTTPException(status_code=404, detail=f"Document ID '{doc_id}' not found in the index.")
    try:
        text = components.loader.read_document(doc_id)
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Could not read document '{doc_id}': {e}")

    return FullDocumentResponse(doc_id=doc_id, text=text)
