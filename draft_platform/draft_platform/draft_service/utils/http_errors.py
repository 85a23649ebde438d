from fastapi import HTTPException, status


def bad_request(msg: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=msg)


def server_error(msg: str, exc: Exception) -> HTTPException:
    # The store's own error text is passed through to the caller
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"error": msg, "details": str(exc)}
    )
