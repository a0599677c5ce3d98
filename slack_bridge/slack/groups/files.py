from __future__ import annotations

from ...observability.logging import get_logger
from ..entities import SlackFile
from ..errors import ClassifiedError, ErrorKind
from ..pagination import PaginatedResult, normalize, page_hints
from .base import OperationGroup, decode, decode_list


log = get_logger("slack.files")


class FileOperations(OperationGroup):
    def list(
        self,
        *,
        channel: str | None = None,
        user: str | None = None,
        types: str | None = None,
        ts_from: str | None = None,
        ts_to: str | None = None,
        limit: int | None = None,
        page: int | None = None,
    ) -> PaginatedResult[SlackFile]:
        data = self._api.call(
            "files.list",
            {
                "channel": channel,
                "user": user,
                "types": types,
                "ts_from": ts_from,
                "ts_to": ts_to,
                "count": limit or 100,
                "page": page,
            },
        )
        items = decode_list(SlackFile, data.get("files"), method="files.list")
        return normalize(items, page_hints(data))

    def info(self, file: str) -> SlackFile:
        data = self._api.call("files.info", {"file": file})
        return decode(SlackFile, data.get("file"), method="files.info")

    def delete(self, file: str) -> None:
        self._api.call("files.delete", {"file": file})

    def upload(
        self,
        channel: str,
        content: str | bytes,
        filename: str,
        *,
        title: str | None = None,
        initial_comment: str | None = None,
        thread_ts: str | None = None,
    ) -> SlackFile:
        """
        Share a file through the external upload flow.

        1) reserve a slot sized to the exact byte length
        2) push the raw bytes to the returned one-time URL
        3) complete the upload, attaching it to `channel`

        Steps are strictly sequential; a failure at any step stops the flow.
        """
        raw = content.encode("utf-8") if isinstance(content, str) else bytes(content)

        slot = self._api.call(
            "files.getUploadURLExternal", {"filename": filename, "length": len(raw)}
        )
        upload_url = str(slot.get("upload_url") or "").strip()
        file_id = str(slot.get("file_id") or "").strip()
        if not upload_url or not file_id:
            raise ClassifiedError(
                kind=ErrorKind.GENERIC,
                message="Slack did not return an upload slot",
                remote_code="invalid_response",
            )

        status = self._api.dispatcher.upload(upload_url, raw)
        log.info("slack_file_bytes_pushed", file_id=file_id, size=len(raw), status_code=status)

        done = self._api.call(
            "files.completeUploadExternal",
            {
                "files": [{"id": file_id, "title": title or filename}],
                "channel_id": channel,
                "initial_comment": initial_comment,
                "thread_ts": thread_ts,
            },
        )
        files = decode_list(SlackFile, done.get("files"), method="files.completeUploadExternal")
        if not files:
            raise ClassifiedError(
                kind=ErrorKind.GENERIC,
                message=f"Upload of {filename} completed without a file",
                remote_code="upload_incomplete",
            )
        return files[0]
