"""TypedDict definition of the viewer configuration.

The host application builds one of these once at startup. Downstream
components (rendering, proxying, link rewriting) only receive it after
``ConfigValidator`` accepted it, and treat it as read-only afterwards.
"""

from __future__ import annotations

from typing import Sequence, TypedDict

__all__ = [
    "ViewerConfig",
    "REQUIRED_FIELDS",
    "OPTIONAL_FIELDS",
]


class _ViewerConfigRequired(TypedDict):
    # URL of the relay page: the iframe src that receives the AMP markup.
    relayPageURL: str
    # Render the AMP page in an opaque origin iframe.
    useOpaqueOrigin: bool


class ViewerConfig(_ViewerConfigRequired, total=False):
    # Image proxy URL, may contain a %s placeholder. Unset: images are not proxied.
    imageProxyURL: str
    # XHR proxy URL. Unset: XHRs are not proxied. Required by templateProxyURL.
    xhrProxyURL: str
    # Template proxy URL. Unset: template rendering is not proxied.
    templateProxyURL: str
    # Run transforming preprocessing modules on the template proxy output.
    # Must be false when templateProxyURL is unset.
    transformTemplateProxyOutput: bool
    # Link redirection endpoint, may contain a %s placeholder.
    linkRedirectURL: str
    # Stop loading if an error occurs within this many milliseconds.
    failOnLoadErrorAfter: float
    # Stop loading if the page has not loaded after this many milliseconds.
    loadTimeout: float
    # Pins the AMP runtime to this 15 digit RTV. Excludes runtimeCDN.
    rtvPin: str
    # Replaces cdn.ampproject.org URLs with this one. Excludes rtvPin.
    runtimeCDN: str
    # Preprocessing modules to skip, e.g. when validation runs server-side.
    skipPreprocessingModules: Sequence[str]
    # Maximum AMP email size in bytes.
    maximumAMPSize: float
    # Strip CSS that does not follow the AMP for Email CSS spec.
    strictCSSSanitization: bool
    # Sets the development flag on the AMP runtime.
    developmentMode: bool


REQUIRED_FIELDS: frozenset[str] = ViewerConfig.__required_keys__
OPTIONAL_FIELDS: frozenset[str] = ViewerConfig.__optional_keys__
