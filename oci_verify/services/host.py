"""検証ホスト呼び出しのインターフェースと実装。"""

import logging
from typing import Callable, Optional

import httpx

from ..config import settings
from ..models.signature import HostCallError

logger = logging.getLogger(__name__)


class HostClient:
    """waPC 形式のホストコールを行うためのインターフェース。"""

    def host_call(
        self, binding: str, namespace: str, operation: str, payload: bytes
    ) -> bytes:
        """ホストの機能を呼び出し、応答のバイト列を返す。"""
        raise NotImplementedError


class Host:
    """
    ポリシーから見たホスト。

    binding / namespace を保持し、呼び出しを HostClient に委譲する。
    """

    def __init__(
        self,
        client: Optional[HostClient] = None,
        *,
        binding: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> None:
        self.client = client or HttpHostClient()
        self.binding = binding or settings.host_binding
        self.namespace = namespace or settings.host_namespace

    def host_call(self, operation: str, payload: bytes) -> bytes:
        return self.client.host_call(self.binding, self.namespace, operation, payload)


class HttpHostClient(HostClient):
    """
    HTTP 経由で検証ホストを呼び出す HostClient。

    `{base_url}/{binding}/{namespace}/{operation}` にペイロードを POST し、
    応答本文をそのまま返す。Wasm ゲスト外でポリシーを動かす場合に使う。
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client_factory: Optional[Callable[[], httpx.Client]] = None,
    ) -> None:
        self._base_url = (base_url or settings.host_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.host_timeout_seconds
        self._http_client_factory = http_client_factory or self._default_http_client_factory

    @property
    def base_url(self) -> str:
        return self._base_url

    def _default_http_client_factory(self) -> httpx.Client:
        return httpx.Client(timeout=httpx.Timeout(self._timeout))

    def host_call(
        self, binding: str, namespace: str, operation: str, payload: bytes
    ) -> bytes:
        """
        Forward a host call to the verification service.

        Args:
            binding: waPC binding (e.g. "kubewarden")
            namespace: capability namespace (e.g. "oci")
            operation: operation name (e.g. "v2/verify")
            payload: JSON encoded request

        Returns:
            Raw response body

        Raises:
            HostCallError: If the service is unreachable or rejects the call
        """
        url = f"{self._base_url}/{binding}/{namespace}/{operation}"
        try:
            with self._http_client_factory() as client:
                response = client.post(
                    url,
                    content=payload,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.TimeoutException as exc:
            logger.warning("検証ホストの応答がタイムアウトしました: %s", url)
            raise HostCallError(
                error_code="HOST_TIMEOUT", message=f"Host call timed out: {exc}"
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("検証ホストに接続できませんでした: %s (%s)", url, exc)
            raise HostCallError(
                error_code="HOST_UNREACHABLE", message=f"Host call failed: {exc}"
            ) from exc

        if not response.is_success:
            logger.warning(
                "検証ホストがエラーを返しました: %s status=%s", url, response.status_code
            )
            # ホストのエラーメッセージはそのまま呼び出し元へ返す
            raise HostCallError(
                error_code="HOST_ERROR",
                message=response.text,
                status_code=response.status_code,
            )

        return response.content
