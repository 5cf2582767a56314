"""Multipart file upload flow.

The upload endpoint does not answer with an envelope. Two quirks apply:

- A successful upload may come back as HTTP 404; that is still a success.
- An expired session shows up as a redirect to the login page, so redirect
  following is disabled here and the ``Location`` header is inspected.

Only one reauthenticate-and-retry cycle is attempted. If the retried upload is
redirected to the login page again, the call still returns normally.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from unifi_rest.errors import UploadError
from unifi_rest.models.requests import UploadRequest

if TYPE_CHECKING:
    from unifi_rest.auth.reauth import ReauthenticationManager
    from unifi_rest.transport.executor import RequestExecutor

logger = logging.getLogger(__name__)

LOGIN_REDIRECT_MARKER = "/manage/account/login?redirect"


class MultipartUploader:
    """Uploads binary files to the controller with a single reauth retry.

    Parameters
    ----------
    executor:
        Executor supplying the base URL, session headers and cookie handling.
    reauth:
        Manager running the bounded reauthenticate-and-retry cycle.
    login_redirect_marker:
        Substring of the ``Location`` header that identifies a login redirect.
    """

    def __init__(
        self,
        executor: RequestExecutor,
        reauth: ReauthenticationManager,
        login_redirect_marker: str = LOGIN_REDIRECT_MARKER,
    ) -> None:
        self._executor = executor
        self._reauth = reauth
        self._login_redirect_marker = login_redirect_marker

    def is_login_redirect(self, response: httpx.Response) -> bool:
        if not response.is_redirect:
            return False
        return self._login_redirect_marker in response.headers.get("location", "")

    def build_request(self, upload: UploadRequest) -> httpx.Request:
        return httpx.Request(
            "POST",
            self._executor.url_for(upload.url),
            headers=self._executor.session_headers(),
            data={"name": upload.field_name},
            files={"filedata": (upload.file_name, upload.data, upload.content_type)},
        )

    async def _attempt(self, upload: UploadRequest) -> httpx.Response:
        # Rebuilt per attempt so the retry carries the post-login CSRF token.
        request = self.build_request(upload)
        return await self._executor.send(request, follow_redirects=False)

    async def upload(self, upload: UploadRequest) -> None:
        """Upload a file; returning normally means the upload is considered done.

        Raises
        ------
        TransportError
            If the controller cannot be reached.
        AuthenticationFailure
            If the login triggered by a login redirect fails.
        UploadError
            If the controller answers with an error status other than 404.
        """
        response = await self._reauth.run(
            lambda: self._attempt(upload),
            self.is_login_redirect,
        )
        status = response.status_code

        if self.is_login_redirect(response):
            logger.warning(
                "Upload to %s still redirected to login after reauthentication; giving up",
                upload.url,
                extra={"url": upload.url, "status_code": status},
            )
            return

        if response.is_redirect:
            logger.warning(
                "Upload to %s redirected to %s; treating as complete",
                upload.url,
                response.headers.get("location", ""),
                extra={"url": upload.url, "status_code": status},
            )
            return

        # The controller answers 404 for uploads that did succeed.
        if response.is_success or status == 404:
            logger.info(
                "Uploaded %s to %s (status %d)",
                upload.file_name,
                upload.url,
                status,
                extra={"url": upload.url, "status_code": status},
            )
            return

        raise UploadError(status, url=upload.url)
