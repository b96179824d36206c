# Services package

from .host import Host, HostClient, HttpHostClient
from .verify import (
    V1,
    V2,
    verify,
    verify_certificate,
    verify_keyless_exact_match,
    verify_keyless_github_actions,
    verify_keyless_prefix_match,
    verify_pub_keys_image,
)

__all__ = [
    "Host",
    "HostClient",
    "HttpHostClient",
    "V1",
    "V2",
    "verify",
    "verify_certificate",
    "verify_keyless_exact_match",
    "verify_keyless_github_actions",
    "verify_keyless_prefix_match",
    "verify_pub_keys_image",
]
