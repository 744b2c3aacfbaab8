from fastapi import FastAPI, APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import request_validation_exception_handler
from dotenv import load_dotenv
from starlette.middleware.cors import CORSMiddleware
import os
import logging
from pathlib import Path

from schemas import GenerateRequest, GenerateResponse, NameResult, SuggestRequest, SuggestResponse, ErrorResponse
from errors import InvalidInput, GenerationFailed
from llm_client import OllamaClient
from name_store import NameHistoryStore
from name_generation import NameGenerator
from trademark_check import TrademarkChecker
from suggestions import suggest_categories

ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / '.env')

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Process-wide state, lost on restart
name_store = NameHistoryStore()
name_generator = NameGenerator(
    model_client=OllamaClient(),
    store=name_store,
    trademark_checker=TrademarkChecker(),
)

# Create the main app
app = FastAPI(title="Brand Name Generator API")

# Router
api_router = APIRouter(prefix="/api")


# Missing or non-JSON bodies keep the public contract instead of a 422
@app.exception_handler(RequestValidationError)
async def body_validation_handler(request: Request, exc: RequestValidationError):
    path = request.url.path.rstrip("/")
    if path == "/api/generate":
        logger.info(f"Rejected /api/generate body: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Category is required"})
    if path == "/api/suggest":
        return JSONResponse(status_code=200, content={"suggestions": []})
    return await request_validation_exception_handler(request, exc)


def get_name_generator() -> NameGenerator:
    return name_generator


@api_router.get("/")
async def root():
    return {"message": "Brand name generator backend is running"}

@api_router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_names(request: GenerateRequest, generator: NameGenerator = Depends(get_name_generator)):
    try:
        ranked = await generator.generate(request.category, request.is_regenerate)
    except InvalidInput:
        return JSONResponse(status_code=400, content={"error": "Category is required"})
    except GenerationFailed as e:
        logger.error(f"Name generation failed for '{request.category}': {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to generate names"})
    except Exception as e:
        logger.exception(f"Unexpected error generating names for '{request.category}': {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to generate names"})

    logger.info(f"Generated {len(ranked)} names for '{request.category}' (regenerate={request.is_regenerate})")
    return GenerateResponse(
        success=True,
        category=request.category,
        results=[NameResult(rank=r.rank, name=r.name, meaning=r.meaning, trademark=r.trademark) for r in ranked],
    )

@api_router.post("/suggest", response_model=SuggestResponse)
async def suggest(request: SuggestRequest, generator: NameGenerator = Depends(get_name_generator)):
    frequencies = generator.store.frequencies()
    return SuggestResponse(suggestions=suggest_categories(frequencies, request.query))

app.include_router(api_router)

# Root-level health check endpoint (no /api prefix)
@app.get("/health")
async def root_health_check():
    return {"status": "healthy"}

# Get CORS origins - handle both wildcard and specific origins
cors_origins_env = os.environ.get('CORS_ORIGINS', '*')
if cors_origins_env == '*':
    cors_origins = ["*"]
    allow_credentials = False  # Can't use credentials with wildcard
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(',')]
    allow_credentials = True

app.add_middleware(
    CORSMiddleware,
    allow_credentials=allow_credentials,
    allow_origins=cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=os.environ.get('HOST', '0.0.0.0'), port=int(os.environ.get('PORT', '8001')))
