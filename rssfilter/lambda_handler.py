"""AWS Lambda entry point for API Gateway proxy events."""

from typing import Any, Dict
from rssfilter.services.pipeline import handle

def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    # API Gateway sends null rather than {} when the query string is empty
    params = (event or {}).get("queryStringParameters") or {}
    result = handle(params)
    return {
        "statusCode": result.status_code,
        "headers": result.headers,
        "body": result.body,
    }
