"""Sigstore によるイメージ署名検証リクエストの組み立てとホスト呼び出し。"""

import logging
from typing import Dict, List, Optional

from pydantic import ValidationError

from ..models.signature import (
    HostResponseError,
    KeylessInfo,
    KeylessPrefixInfo,
    SigstoreCertificateVerify,
    SigstoreGithubActionsVerify,
    SigstoreKeylessPrefixVerify,
    SigstoreKeylessVerifyExact,
    SigstorePubKeysVerify,
    SigstoreVerifyRequest,
    VerificationResponse,
)
from .host import Host

logger = logging.getLogger(__name__)

# ホストが提供する検証プロトコルの世代
V1 = "v1/verify"
V2 = "v2/verify"


def verify(
    host: Host, request: SigstoreVerifyRequest, operation: str
) -> VerificationResponse:
    """
    リクエストをシリアライズしてホストに送り、応答を VerificationResponse に変換する。

    ホスト呼び出しで発生した例外は変換せずにそのまま送出する。
    """
    payload = request.to_payload()
    logger.debug(
        "verification request type=%s image=%s operation=%s",
        getattr(request, "type", None),
        request.image,
        operation,
    )

    response_payload = host.host_call(operation, payload)

    try:
        return VerificationResponse.model_validate_json(response_payload)
    except ValidationError as exc:
        raise HostResponseError(f"cannot decode verification response: {exc}") from exc


def verify_pub_keys_image(
    host: Host,
    image: str,
    pub_keys: List[str],
    annotations: Optional[Dict[str, str]] = None,
) -> VerificationResponse:
    """
    公開鍵でイメージの sigstore 署名を検証する。

    Args:
        host: 検証ホスト
        image: 検証対象のイメージ (例: registry.testing.lan/busybox:1.0.0)
        pub_keys: OCI オブジェクトの署名に使われている必要がある PEM 公開鍵の一覧
        annotations: 全署名者が署名時に付与している必要があるアノテーション
    """
    request = SigstorePubKeysVerify(
        image=image, pub_keys=pub_keys, annotations=annotations
    )
    return verify(host, request, V2)


def verify_keyless_exact_match(
    host: Host,
    image: str,
    keyless: List[KeylessInfo],
    annotations: Optional[Dict[str, str]] = None,
) -> VerificationResponse:
    """
    keyless 署名を OIDC の issuer/subject の完全一致で検証する。

    Args:
        host: 検証ホスト
        image: 検証対象のイメージ
        keyless: issuer と subject の組の一覧
        annotations: 全署名者が署名時に付与している必要があるアノテーション
    """
    request = SigstoreKeylessVerifyExact(
        image=image, keyless=keyless, annotations=annotations
    )
    return verify(host, request, V2)


def verify_keyless_prefix_match(
    host: Host,
    image: str,
    keyless_prefix: List[KeylessPrefixInfo],
    annotations: Optional[Dict[str, str]] = None,
) -> VerificationResponse:
    """
    keyless 署名を issuer と subject の URL プレフィックスで検証する。

    url_prefix はタイポスクワッティング防止のためホスト側で末尾に `/` を
    付けて正規化され、署名の subject がそのプレフィックスで始まる場合のみ一致する。
    """
    request = SigstoreKeylessPrefixVerify(
        image=image, keyless_prefix=keyless_prefix, annotations=annotations
    )
    return verify(host, request, V2)


def verify_keyless_github_actions(
    host: Host,
    image: str,
    owner: str,
    repo: Optional[str] = None,
    annotations: Optional[Dict[str, str]] = None,
) -> VerificationResponse:
    """GitHub Actions で作成された keyless 署名を owner (と任意の repo) で検証する。"""
    request = SigstoreGithubActionsVerify(
        image=image, owner=owner, repo=repo, annotations=annotations
    )
    return verify(host, request, V2)


def verify_certificate(
    host: Host,
    image: str,
    certificate: str,
    certificate_chain: Optional[List[str]] = None,
    require_rekor_bundle: bool = True,
    annotations: Optional[Dict[str, str]] = None,
) -> VerificationResponse:
    """
    利用者が指定した証明書でイメージの署名を検証する。

    Args:
        host: 検証ホスト
        image: 検証対象のイメージ
        certificate: 署名の検証に使う PEM 証明書
        certificate_chain: certificate を検証する PEM 証明書の一覧。
            未指定の場合 certificate は信頼済みとみなされる
        require_rekor_bundle: 署名レイヤーに Rekor バンドルを必須とするか。
            Rekor バンドルがあれば署名が証明書の有効期間内に作成されたことも確認できる
        annotations: 全署名者が署名時に付与している必要があるアノテーション
    """
    request = SigstoreCertificateVerify(
        image=image,
        certificate=certificate,
        certificate_chain=certificate_chain,
        require_rekor_bundle=require_rekor_bundle,
        annotations=annotations,
    )
    return verify(host, request, V2)
