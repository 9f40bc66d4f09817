"""Provider HTTP helpers.

토큰 교환(POST form)과 사용자 정보 조회(GET bearer)를 수행하고
httpx 오류를 ProviderExchangeError / ProviderProfileError로 변환합니다.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from apps.social_auth.application.common.exceptions.auth import (
    ProviderExchangeError,
    ProviderProfileError,
)
from apps.social_auth.domain.enums.oauth_provider import OAuthProvider
from apps.social_auth.setup.config import Settings

logger = logging.getLogger(__name__)


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """프로바이더 호출용 HTTP 클라이언트 (connect 5s / read 20s)."""
    timeout = httpx.Timeout(settings.http_read_timeout, connect=settings.http_connect_timeout)
    return httpx.AsyncClient(timeout=timeout, headers={"Accept": "application/json"})


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return ""
    if isinstance(payload, dict) and payload.get("error"):
        detail = f"{payload['error']} {payload.get('error_description') or ''}".strip()
        return f" ({detail})"
    return ""


async def request_access_token(
    client: httpx.AsyncClient,
    *,
    provider: OAuthProvider,
    url: str,
    data: dict[str, str],
) -> str:
    """토큰 엔드포인트에 authorization_code 교환 요청.

    Raises:
        ProviderExchangeError: 타임아웃, 비정상 응답, error 필드, access_token 누락
    """
    name = provider.value
    try:
        response = await client.post(url, data=data)
        response.raise_for_status()
        payload: Any = response.json()
    except httpx.TimeoutException as e:
        logger.warning("Provider token request timed out", extra={"provider": name})
        raise ProviderExchangeError(name, "token request timed out") from e
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.warning(
            "Provider token request rejected",
            extra={"provider": name, "status_code": status_code},
        )
        raise ProviderExchangeError(
            name, f"token endpoint returned HTTP {status_code}{_error_detail(e.response)}"
        ) from e
    except httpx.HTTPError as e:
        logger.warning("Provider token request failed", extra={"provider": name, "error": str(e)})
        raise ProviderExchangeError(name, f"token request failed: {e}") from e
    except ValueError as e:
        raise ProviderExchangeError(name, "token endpoint returned a non-JSON body") from e

    if not isinstance(payload, dict):
        raise ProviderExchangeError(name, "token endpoint returned an unexpected body")

    # 네이버는 200 응답에 error 필드를 담아 실패를 알리는 경우가 있음
    if payload.get("error"):
        description = payload.get("error_description") or ""
        logger.warning(
            "Provider token response carried an error",
            extra={"provider": name, "error": payload["error"]},
        )
        raise ProviderExchangeError(name, f"{payload['error']} {description}".strip())

    access_token = payload.get("access_token")
    if not access_token:
        raise ProviderExchangeError(name, "token response has no access_token")

    logger.debug("Provider access token obtained", extra={"provider": name})
    return str(access_token)


async def request_user_info(
    client: httpx.AsyncClient,
    *,
    provider: OAuthProvider,
    url: str,
    access_token: str,
) -> dict[str, Any]:
    """사용자 정보 엔드포인트 조회 (Bearer 인증).

    Raises:
        ProviderProfileError: 타임아웃, 비정상 응답, JSON이 아닌 본문
    """
    name = provider.value
    if not access_token:
        raise ProviderProfileError(name, "provider access token is empty")

    headers = {"Authorization": f"Bearer {access_token}"}
    try:
        response = await client.get(url, headers=headers)
        response.raise_for_status()
        payload: Any = response.json()
    except httpx.TimeoutException as e:
        logger.warning("Provider profile request timed out", extra={"provider": name})
        raise ProviderProfileError(name, "profile request timed out") from e
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.warning(
            "Provider profile request rejected",
            extra={"provider": name, "status_code": status_code},
        )
        raise ProviderProfileError(name, f"user-info endpoint returned HTTP {status_code}") from e
    except httpx.HTTPError as e:
        logger.warning("Provider profile request failed", extra={"provider": name, "error": str(e)})
        raise ProviderProfileError(name, f"profile request failed: {e}") from e
    except ValueError as e:
        raise ProviderProfileError(name, "user-info endpoint returned a non-JSON body") from e

    if not isinstance(payload, dict):
        raise ProviderProfileError(name, "user-info endpoint returned an unexpected body")
    return payload


def require_identifier(provider: OAuthProvider, value: Any) -> str:
    """프로필의 고유 식별자 검증."""
    if value is None or str(value).strip() == "":
        raise ProviderProfileError(provider.value, "profile response has no stable identifier")
    return str(value)
