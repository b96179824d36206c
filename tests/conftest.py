from __future__ import annotations

import json
import os
from typing import Optional

import pytest
from hypothesis import settings

from oci_verify.models.signature import parse_verification_request
from oci_verify.services.host import Host, HostClient

_DEFAULT_MAX_EXAMPLES = int(os.getenv("HYPOTHESIS_MAX_EXAMPLES", "25"))

if "HYPOTHESIS_PROFILE" not in os.environ:
    try:
        settings.register_profile(
            "ci",
            settings(
                deadline=None,
                max_examples=_DEFAULT_MAX_EXAMPLES,
            ),
        )
    except ValueError:
        # プロファイルが既に存在する場合は無視して既定プロファイルを読み込む
        pass
    settings.load_profile("ci")


class RecordingHostClient(HostClient):
    """呼び出し内容を記録し、固定の応答を返すテスト用 HostClient。"""

    def __init__(
        self,
        response: Optional[bytes] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.response = (
            response
            if response is not None
            else json.dumps({"is_trusted": True, "digest": "sha256:abc123"}).encode()
        )
        self.error = error
        self.calls: list[tuple[str, str, str, bytes]] = []

    def host_call(
        self, binding: str, namespace: str, operation: str, payload: bytes
    ) -> bytes:
        self.calls.append((binding, namespace, operation, payload))
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_payload(self) -> dict:
        return json.loads(self.calls[-1][3])

    @property
    def last_request(self):
        return parse_verification_request(self.calls[-1][3])


@pytest.fixture
def recording_client() -> RecordingHostClient:
    return RecordingHostClient()


@pytest.fixture
def host(recording_client: RecordingHostClient) -> Host:
    return Host(recording_client, binding="kubewarden", namespace="oci")


@pytest.fixture
def make_host_client():
    """応答やエラーを指定して RecordingHostClient を生成するファクトリ。"""
    return RecordingHostClient
