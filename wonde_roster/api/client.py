"""
HTTP client for the Wonde school-information API.

Only the two read endpoints the roster needs are wrapped. Every request is
a blocking GET authenticated with a bearer token.
"""

import requests

from ..core.config import API_BASE_URL, logger
from ..exceptions import ApiError, RequestError


class WondeClient:
    """Fetches employee and class data for a single school."""

    def __init__(self, access_token, school_id, base_url=API_BASE_URL, session=None):
        self.access_token = access_token
        self.school_id = school_id
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.headers = {
            'Authorization': f'Bearer {access_token}',
            'Accept': 'application/json',
        }

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        self.session.close()

    def get_employee(self, employee_id):
        """
        Fetch an employee with their classes, lessons and lesson periods.

        Args:
            employee_id: Wonde ID of the employee (teacher)

        Returns:
            dict: Decoded JSON response
        """
        url = f"{self.base_url}/schools/{self.school_id}/employees/{employee_id}"
        return self._send_request(url, {'include': 'classes.lessons.period'})

    def get_class_students(self, class_id):
        """
        Fetch a class with its students.

        Args:
            class_id: Wonde ID of the class

        Returns:
            dict: Decoded JSON response
        """
        url = f"{self.base_url}/schools/{self.school_id}/classes/{class_id}"
        return self._send_request(url, {'include': 'students'})

    def _send_request(self, url, params):
        """
        Send an authenticated GET request and decode the JSON body.

        Raises:
            RequestError: If the request could not be sent or answered
            ApiError: If the status is 400 or above, or the body is not JSON
        """
        logger.debug(f"GET {url} {params}")
        try:
            response = self.session.get(url, params=params, headers=self.headers)
        except requests.RequestException as e:
            logger.debug(f"Request to {url} failed: {e}")
            raise RequestError(f"Request error: {e}") from e

        if response.status_code >= 400:
            message = _error_message(response)
            logger.debug(f"API returned {response.status_code} for {url}: {message}")
            raise ApiError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise ApiError("Invalid JSON in response", status_code=response.status_code) from e


def _error_message(response):
    """Return the server's message field, or 'Unknown error'."""
    try:
        data = response.json()
    except ValueError:
        return 'Unknown error'
    if isinstance(data, dict) and data.get('message'):
        return str(data['message'])
    return 'Unknown error'
