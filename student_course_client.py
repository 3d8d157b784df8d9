"""Student Course API client.

A thin wrapper around the REST API built on ``requests``.  It exposes
one method per operation:

* :meth:`list_students` / :meth:`list_courses` – filtered, paginated listings.
* :meth:`get_student` / :meth:`get_course` – an entity with its relations.
* :meth:`create_student` / :meth:`create_course`.
* :meth:`update_student` / :meth:`update_course` – partial updates.
* :meth:`delete_student` / :meth:`delete_course`.
* :meth:`enroll` / :meth:`unenroll` – manage enrollments.

Every method returns a tuple whose last element is ``error``:

* listings return ``(items, total, error)``;
* deletes and :meth:`unenroll` return ``(ok, error)``;
* everything else returns ``(data, error)``.

On success ``error`` is ``None``; on failure the other elements are
empty and ``error`` is a dictionary with ``status_code`` and
``message`` keys, the message being the ``error`` field the API returns.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class StudentCourseClient:
    """Client for interacting with the Student Course API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:3000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body
            (``None`` for empty responses such as 204).
        """
        url = f"{self.base_url}{path}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("error", "")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any]) -> Tuple[List[Dict[str, Any]], int, Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error or not isinstance(data, dict):
            return [], 0, error
        return data.get("items", []), data.get("total", 0), None

    # ------------------------------------------------------------------
    # Students
    # ------------------------------------------------------------------
    def list_students(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Dict[str, Any]], int, Optional[Error]]:
        """Return ``(students, total, error)`` for one page of students."""
        return self._list("/students", {"name": name, "email": email, "page": page, "limit": limit})

    def get_student(self, student_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/students/{student_id}")

    def create_student(self, name: str, email: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/students", json_body={"name": name, "email": email})

    def update_student(self, student_id: int, **fields: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/students/{student_id}", json_body=fields)

    def delete_student(self, student_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/students/{student_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Courses
    # ------------------------------------------------------------------
    def list_courses(
        self,
        title: Optional[str] = None,
        teacher: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Dict[str, Any]], int, Optional[Error]]:
        """Return ``(courses, total, error)`` for one page of courses."""
        return self._list("/courses", {"title": title, "teacher": teacher, "page": page, "limit": limit})

    def get_course(self, course_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/courses/{course_id}")

    def create_course(self, title: str, teacher: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/courses", json_body={"title": title, "teacher": teacher})

    def update_course(self, course_id: int, **fields: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/courses/{course_id}", json_body=fields)

    def delete_course(self, course_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/courses/{course_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Enrollment
    # ------------------------------------------------------------------
    def enroll(self, student_id: int, course_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", f"/courses/{course_id}/students/{student_id}")

    def unenroll(self, student_id: int, course_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/courses/{course_id}/students/{student_id}")
        return error is None, error
