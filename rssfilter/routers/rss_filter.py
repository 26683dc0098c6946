from fastapi import APIRouter, Request
from fastapi.responses import Response
from rssfilter.services.pipeline import handle

router = APIRouter(tags=["rss"])

@router.get("/filter", response_class=Response)
def filter_rss(request: Request) -> Response:
    # url=<feed>&<field>=<keyword>..., repeated fields allowed
    result = handle(request.query_params.multi_items())
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
        media_type=None if result.headers else "text/plain",
    )
