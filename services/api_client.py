# -*- coding: utf-8 -*-
"""
Biochar API Client - HTTP access to the supply-chain backend.
==============================================================

Covers the endpoints the entry wizards submit to and read options from.
Payload keys are converted between the desktop's snake_case and the API's
camelCase at this boundary only.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
import urllib3

from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def convert_keys(value: Any, converter) -> Any:
    """Recursively convert mapping keys (lists are walked, values kept)."""
    if isinstance(value, dict):
        return {converter(k): convert_keys(v, converter) for k, v in value.items()}
    if isinstance(value, list):
        return [convert_keys(item, converter) for item in value]
    return value


@dataclass
class ApiConfig:
    """
    API connection settings.

    Values left as None are loaded from Config (which reads .env).

    Example .env:
        API_BASE_URL=http://localhost:3000/api
        API_TOKEN=...
    """
    base_url: str = None
    timeout: int = None
    verify_ssl: bool = None
    token: Optional[str] = None

    def __post_init__(self):
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL
        if self.token is None:
            self.token = Config.API_TOKEN


class BiocharApiClient:
    """
    Client for the biochar backend.

    Usage:
        client = BiocharApiClient(ApiConfig(base_url="http://localhost:3000/api"))
        batch = client.create_production_batch({"production_date": "2026-01-05", ...})
    """

    def __init__(self, config: Optional[ApiConfig] = None):
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')

        if not self.config.verify_ssl:
            # Self-signed certificates on local backends
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json"
        }
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None
    ) -> Any:
        """
        Execute an HTTP request and translate failures.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (e.g. "/production")
            json_data: snake_case payload, sent as camelCase
            params: Query parameters

        Returns:
            Response JSON with snake_case keys, or None for an empty body

        Raises:
            ApiException: The API answered with an error status
            NetworkException: Connection failure or timeout
        """
        url = f"{self.base_url}{endpoint}"
        body = convert_keys(json_data, to_camel_case) if json_data is not None else None

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.debug(f"[API REQ] Params: {params}")
        if body is not None:
            logger.debug(f"[API REQ] Body: {json.dumps(body, ensure_ascii=False, default=str)}")

        try:
            response = requests.request(
                method=method,
                url=url,
                data=json.dumps(body, default=str) if body is not None else None,
                params=params,
                headers=self._headers(),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()

            result = response.json() if response.text else None
            logger.info(f"[API RES] {response.status_code} {endpoint}")
            return convert_keys(result, to_snake_case)

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            if not isinstance(response_data, dict):
                response_data = {"details": response_data}

            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            api_message = response_data.get("error")
            raise ApiException(
                message=api_message if isinstance(api_message, str) and api_message else str(e),
                status_code=status_code,
                response_data=response_data
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )

    # ==================== Production ====================

    def create_production_batch(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create a production batch from wizard data."""
        return self._request("POST", "/production", json_data=payload)

    def update_production_batch(self, batch_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Update an existing production batch."""
        return self._request("PUT", f"/production/{batch_id}", json_data=payload)

    def list_production_batches(self) -> List[Dict[str, Any]]:
        """Production batches available for sequestration linkage."""
        return self._request("GET", "/production") or []

    # ==================== Sequestration ====================

    def create_sequestration_event(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create a sequestration event from wizard data."""
        return self._request("POST", "/sequestration", json_data=payload)

    def update_sequestration_event(self, event_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Update an existing sequestration event."""
        return self._request("PUT", f"/sequestration/{event_id}", json_data=payload)

    # ==================== Feedstock ====================

    def list_feedstock_deliveries(self) -> List[Dict[str, Any]]:
        """Feedstock deliveries a production batch can be linked to."""
        return self._request("GET", "/feedstock") or []


# Singleton instance
_api_client_instance: Optional[BiocharApiClient] = None


def get_api_client(config: Optional[ApiConfig] = None) -> BiocharApiClient:
    """
    Return the shared client.

    Args:
        config: Only used when the client is first created
    """
    global _api_client_instance

    if _api_client_instance is None:
        _api_client_instance = BiocharApiClient(config)

    return _api_client_instance


def reset_api_client():
    """Drop the shared client (used by tests)."""
    global _api_client_instance
    _api_client_instance = None
