"""Sigstore 署名検証リクエスト/レスポンスのモデルと例外。"""

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_serializer, field_validator


class HostCallError(Exception):
    """検証ホスト呼び出しの失敗を表す例外。"""

    def __init__(
        self,
        *,
        error_code: str,
        message: str,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.message = message
        self.status_code = status_code


class HostResponseError(HostCallError):
    """ホストの応答を VerificationResponse として解釈できない。"""

    def __init__(self, message: str) -> None:
        super().__init__(error_code="INVALID_RESPONSE", message=message)


def _to_code_points(value: str) -> List[int]:
    return [ord(ch) for ch in value]


def _from_code_points(value: object) -> object:
    """コードポイント配列を文字列に戻す。文字列はそのまま返す。"""
    if isinstance(value, list) and all(type(item) is int for item in value):
        return "".join(chr(item) for item in value)
    return value


class KeylessInfo(BaseModel):
    """OIDC プロバイダの issuer/subject の組。"""

    model_config = ConfigDict(frozen=True)

    issuer: str = Field(description="OIDC issuer (例: https://token.actions.githubusercontent.com)")
    subject: str = Field(description="署名者の subject (メールアドレスや URL)")


class KeylessPrefixInfo(BaseModel):
    """
    issuer と subject の URL プレフィックスの組。

    ホスト側で url_prefix の末尾に `/` を付与して正規化し、
    署名の subject がそのプレフィックスで始まる場合に一致とみなす。
    """

    model_config = ConfigDict(frozen=True)

    issuer: str
    url_prefix: str = Field(description="subject と前方一致させる URL")


class SigstoreVerifyRequest(BaseModel):
    """全リクエスト共通のフィールド。"""

    model_config = ConfigDict(frozen=True)

    image: str = Field(description="検証対象のイメージ (例: registry.testing.lan/busybox:1.0.0)")
    annotations: Optional[Dict[str, str]] = Field(
        default=None, description="全署名者が署名時に付与している必要があるアノテーション"
    )

    def to_payload(self) -> bytes:
        """ホストへ送る JSON バイト列を返す。"""
        return self.model_dump_json().encode("utf-8")


class SigstorePubKeysVerify(SigstoreVerifyRequest):
    """公開鍵による検証。"""

    type: Literal["SigstorePubKeyVerify"] = "SigstorePubKeyVerify"
    pub_keys: List[str] = Field(description="PEM エンコードされた公開鍵の一覧")


class SigstoreKeylessVerifyExact(SigstoreVerifyRequest):
    """keyless 署名を issuer/subject の完全一致で検証する。"""

    type: Literal["SigstoreKeylessVerify"] = "SigstoreKeylessVerify"
    keyless: List[KeylessInfo]


class SigstoreKeylessPrefixVerify(SigstoreVerifyRequest):
    """keyless 署名を issuer と URL プレフィックスで検証する。"""

    type: Literal["SigstoreKeylessPrefixVerify"] = "SigstoreKeylessPrefixVerify"
    keyless_prefix: List[KeylessPrefixInfo]


class SigstoreGithubActionsVerify(SigstoreVerifyRequest):
    """
    GitHub Actions で作成された keyless 署名の検証。

    repo 未指定時は空文字列ではなく null を送る (ホストは repo の制約なしとして扱う)。
    """

    type: Literal["SigstoreGithubActionsVerify"] = "SigstoreGithubActionsVerify"
    owner: str = Field(description="リポジトリの owner (例: octocat)")
    repo: Optional[str] = Field(
        default=None, description="署名したワークフローのリポジトリ名（任意）"
    )


class SigstoreCertificateVerify(SigstoreVerifyRequest):
    """
    利用者が指定した証明書による検証。

    certificate / certificate_chain はホストとの互換性のため
    Unicode コードポイントの配列としてシリアライズする。
    """

    type: Literal["SigstoreCertificateVerify"] = "SigstoreCertificateVerify"
    certificate: str = Field(description="PEM エンコードされた証明書")
    certificate_chain: Optional[List[str]] = Field(
        default=None,
        description="certificate を検証するための PEM 証明書チェーン。未指定時は certificate を信頼済みとみなす",
    )
    require_rekor_bundle: bool = Field(
        default=True, description="署名レイヤーに Rekor バンドルを必須とするか"
    )

    @field_validator("certificate", mode="before")
    @classmethod
    def decode_certificate(cls, value: object) -> object:
        return _from_code_points(value)

    @field_validator("certificate_chain", mode="before")
    @classmethod
    def decode_certificate_chain(cls, value: object) -> object:
        if isinstance(value, list):
            return [_from_code_points(item) for item in value]
        return value

    @field_serializer("certificate")
    def serialize_certificate(self, value: str) -> List[int]:
        return _to_code_points(value)

    @field_serializer("certificate_chain")
    def serialize_certificate_chain(
        self, value: Optional[List[str]]
    ) -> Optional[List[List[int]]]:
        if value is None:
            return None
        return [_to_code_points(item) for item in value]


VerificationRequest = Annotated[
    Union[
        SigstorePubKeysVerify,
        SigstoreKeylessVerifyExact,
        SigstoreKeylessPrefixVerify,
        SigstoreGithubActionsVerify,
        SigstoreCertificateVerify,
    ],
    Field(discriminator="type"),
]

_request_adapter: TypeAdapter[VerificationRequest] = TypeAdapter(VerificationRequest)


def parse_verification_request(payload: Union[bytes, str]) -> SigstoreVerifyRequest:
    """ワイヤ形式の JSON を type に応じたリクエストモデルに変換する。"""
    return _request_adapter.validate_json(payload)


class VerificationResponse(BaseModel):
    """検証ホストから返される結果。"""

    model_config = ConfigDict(frozen=True)

    is_trusted: bool = Field(description="署名が信頼できるか")
    digest: str = Field(description="検証したイメージのダイジェスト")
