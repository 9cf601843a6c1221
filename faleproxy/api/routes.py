import httpx
from fastapi import APIRouter, Depends

from faleproxy.fetch.scraper import get_http_client
from faleproxy.schemas import ErrorResponse, FetchRequest, FetchResult
from faleproxy.services.relay import process_fetch_request

router = APIRouter()

@router.post(
    "/fetch",
    response_model=FetchResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def fetch_and_replace(
    request: FetchRequest,
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Fetch a page and replace Yale with Fale in its text.

    Returns the rewritten HTML, its title and the URL as submitted. Links and
    other attributes still point at the original site.
    """
    return await process_fetch_request(request.url, client)
