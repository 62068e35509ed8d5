"""
HTTP service: profile sync endpoint plus health probes.

Run with any ASGI server, e.g. ``uvicorn athlete_sync.api:app``.
"""
import logging
from datetime import datetime, timezone
from typing import Iterator

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from athlete_sync import __version__
from athlete_sync.errors import (
    InvalidInputError,
    NavigationTimeoutError,
    OperationTimeoutError,
    SyncError,
)
from athlete_sync.scraper import AthleteSyncer

logger = logging.getLogger('athlete_sync.api')

app = FastAPI(title='athlete-sync', version=__version__)
START = datetime.now(timezone.utc).isoformat()


class SyncRequest(BaseModel):
    url: str | None = None
    timeout_s: float | None = None


def get_syncer() -> Iterator[AthleteSyncer]:
    syncer = AthleteSyncer()
    try:
        yield syncer
    finally:
        syncer.close()


@app.get('/')
def root():
    return {'service': 'athlete-sync', 'status': 'ok', 'start': START}


@app.get('/health')
def health():
    return {'ok': True}


@app.get('/ready')
def ready():
    return {'ready': True}


@app.post('/api/sync')
def sync(request: SyncRequest, syncer: AthleteSyncer = Depends(get_syncer)):
    try:
        record = syncer.sync(request.url, timeout_s=request.timeout_s)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except (NavigationTimeoutError, OperationTimeoutError) as e:
        logger.error(f'Sync timed out for {request.url}: {e}')
        raise HTTPException(status_code=504, detail=str(e)) from e
    except SyncError as e:
        logger.error(f'Sync failed for {request.url}: {e}')
        raise HTTPException(status_code=502, detail=str(e)) from e

    return {'success': True, 'data': record.model_dump(by_alias=True)}
