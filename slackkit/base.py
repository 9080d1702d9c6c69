"""Shared HTTP plumbing for the Web API client."""

import requests

from .errors import SlackApiError, SlackError


def check_response(data):
    """Return the decoded response, or raise SlackApiError if it is not ok."""
    if not data.get("ok"):
        raise SlackApiError(data.get("error") or "", data)
    return data


class BaseClient:
    """Posts form-encoded calls to the Web API and decodes the JSON answers."""

    def __init__(self, token, api_url, *, session=None):
        self.token = token
        self.endpoint = api_url if api_url.endswith("/") else api_url + "/"
        self.session = session if session is not None else requests.Session()

    def _form(self, values):
        form = {"token": self.token}
        form.update(values or {})
        return form

    @staticmethod
    def _decode(response):
        if response.status_code != 200:
            raise SlackError(f"slack server error: {response.status_code} {response.reason}")
        try:
            data = response.json()
        except ValueError as exc:
            raise SlackError(f"invalid JSON in response: {exc}") from exc
        if not isinstance(data, dict):
            raise SlackError("unexpected JSON document in response")
        return check_response(data)

    def post_method(self, method, values=None):
        """Call an API method with form values and return the decoded answer."""
        response = self.session.post(self.endpoint + method, data=self._form(values))
        return self._decode(response)

    def _post_multipart(self, method, values, field_name, filename, stream):
        response = self.session.post(
            self.endpoint + method,
            data=self._form(values),
            files={field_name: (filename, stream)},
        )
        return self._decode(response)

    def auth_test(self):
        """Check that the token is accepted and return the API's answer."""
        return self.post_method("auth.test")