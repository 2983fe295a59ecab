"""
Titanic EDA: FastAPI backend + self-contained Chart.js frontend.
Entrypoint:
    uvicorn app:app --host 0.0.0.0 --port 8080
"""
import io, logging
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from titanic_eda import config
from titanic_eda.analysis import compute_missing_profile, rank_factors, strongest_factor
from titanic_eda.charts import missing_chart, survival_charts
from titanic_eda.dataset import Session, load_csv, records
from titanic_eda.errors import DatasetNotLoadedError, DatasetParseError
from titanic_eda.features import derive_age_group
from titanic_eda.frontend import FRONTEND_HTML
from titanic_eda.models import AnalyzeResponse, FactorScore, HealthResponse, LoadResponse, Preview

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Titanic EDA")
app.add_middleware(CORSMiddleware, allow_origins=config.CORS_ORIGINS, allow_methods=["*"], allow_headers=["*"])
app.state.session = Session()

NO_FILE_MSG    = "Please upload train.csv"
NOT_LOADED_MSG = "Load data first"
RESULT_MSG     = "The most important factor of death is: {} (largest difference in survival rates across groups)"


def get_session(request: Request) -> Session:
    return request.app.state.session


@app.exception_handler(DatasetNotLoadedError)
def not_loaded(request: Request, exc: DatasetNotLoadedError):
    return JSONResponse({"detail": NOT_LOADED_MSG}, status_code=409)


def _preview(df, columns) -> Preview:
    return Preview(columns=columns, rows=records(df[columns], config.PREVIEW_ROWS))


# ── API routes ────────────────────────────────────────────────────────────────

@app.get("/api/health", response_model=HealthResponse)
def health(session: Session = Depends(get_session)):
    if not session.is_loaded:
        return HealthResponse(status="ok", loaded=False)
    return HealthResponse(status="ok", loaded=True, rows=len(session.get_dataset()))


@app.post("/api/load", response_model=LoadResponse)
def on_load(file: Optional[UploadFile] = File(None), session: Session = Depends(get_session)):
    if file is None or not file.filename:
        logger.info("Load rejected: no file selected")
        raise HTTPException(status_code=400, detail=NO_FILE_MSG)

    limit = int(config.MAX_UPLOAD_MB * 1024 * 1024)
    raw = file.file.read(limit + 1)
    if len(raw) > limit:
        raise HTTPException(status_code=413, detail=f"File exceeds {config.MAX_UPLOAD_MB:g} MB")

    try:
        df = load_csv(io.BytesIO(raw))
    except DatasetParseError as e:
        logger.exception("Load of %s failed", file.filename)
        raise HTTPException(status_code=422, detail=str(e))
    if len(df) == 0:
        raise HTTPException(status_code=422, detail="No rows with a Survived value")

    columns = list(df.columns)
    head = _preview(df, columns)
    profile = compute_missing_profile(df)
    derive_age_group(df)
    session.set_dataset(df, columns)
    logger.info("Loaded %s: %d rows, %d columns", file.filename, len(df), len(columns))

    return LoadResponse(
        rows=len(df),
        preview=head,
        missing_chart=missing_chart(profile),
        survival_charts=survival_charts(df),
    )


@app.post("/api/analyze", response_model=AnalyzeResponse)
def on_analyze(session: Session = Depends(get_session)):
    if not session.is_loaded:
        logger.info("Analyze rejected: no dataset loaded")
        raise HTTPException(status_code=409, detail=NOT_LOADED_MSG)

    ranking = rank_factors(session.get_dataset())
    top = strongest_factor(ranking)
    logger.info("Strongest factor: %s", top)
    return AnalyzeResponse(
        top=top,
        ranking=[FactorScore(feature=f, spread=s) for f, s in ranking],
        message=RESULT_MSG.format(top),
    )


@app.get("/api/preview", response_model=Preview)
def preview(session: Session = Depends(get_session)):
    return _preview(session.get_dataset(), session.columns)


@app.get("/api/missing")
def missing(session: Session = Depends(get_session)):
    df = session.get_dataset()
    return missing_chart(compute_missing_profile(df[session.columns]))


@app.get("/api/survival")
def survival(session: Session = Depends(get_session)):
    return survival_charts(session.get_dataset())


# ── Serve the self-contained frontend ─────────────────────────────────────────
@app.get("/", response_class=HTMLResponse)
@app.get("/{full_path:path}", response_class=HTMLResponse)
def frontend(full_path: str = ""):
    # Unknown API paths stay JSON 404s
    if full_path.startswith("api/"):
        return JSONResponse({"detail": "Not found"}, status_code=404)
    return HTMLResponse(FRONTEND_HTML)


if __name__ == "__main__":
    uvicorn.run(app, host=config.HOST, port=config.PORT)
