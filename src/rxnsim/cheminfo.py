# cheminfo.py

import logging
import os
from dataclasses import dataclass
from typing import Optional

import requests

logger = logging.getLogger(__name__)

BASE_URL_ENV = "FASTAPI_CHEM_BASE_URL"
API_KEY_ENV = "FASTAPI_CHEM_API_KEY"
REQUEST_TIMEOUT = 15


class ChemServiceError(RuntimeError):
    """The cheminformatics backend could not be reached or answered with an error."""


class ChemServiceNotConfigured(ChemServiceError):
    pass


@dataclass(frozen=True)
class ChemServiceConfig:
    base_url: Optional[str] = None
    api_key: Optional[str] = None

    @classmethod
    def from_env(cls, environ=None) -> "ChemServiceConfig":
        env = os.environ if environ is None else environ
        return cls(base_url=env.get(BASE_URL_ENV) or None,
                   api_key=env.get(API_KEY_ENV) or None)

    @property
    def configured(self) -> bool:
        return bool(self.base_url)


class ChemServiceClient:
    """Minimal client for the FastAPI cheminformatics backend (JSON over POST)."""

    def __init__(self, config: Optional[ChemServiceConfig] = None, session=None):
        self.config = config if config is not None else ChemServiceConfig.from_env()
        self.session = session if session is not None else requests

    def headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    def call(self, endpoint: str, payload):
        if not self.config.configured:
            raise ChemServiceNotConfigured(
                f"{BASE_URL_ENV} is not set. Point it at the cheminformatics service to enable it."
            )
        url = f"{self.config.base_url.rstrip('/')}{endpoint}"
        try:
            resp = self.session.post(url, json=payload, headers=self.headers(), timeout=REQUEST_TIMEOUT)
        except requests.RequestException as e:
            raise ChemServiceError(f"FastAPI request to {endpoint} failed: {e}") from e

        if not resp.ok:
            raise ChemServiceError(f"FastAPI error {resp.status_code} on {endpoint}: {resp.text}")
        logger.debug("FastAPI %s -> %s", endpoint, resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise ChemServiceError(f"FastAPI returned invalid JSON on {endpoint}") from e

    def validate_structure(self, structure: str) -> dict:
        """{"isValid": bool, "message": optional str}"""
        return self.call("/validate", {"structure": structure})

    def normalize_smiles(self, smiles: str) -> dict:
        return self.call("/normalize_smiles", {"smiles": smiles})

    def compute_descriptors(self, smiles: str) -> dict:
        return self.call("/descriptors", {"smiles": smiles})

    def predict_products(self,
                         reactants: list[str],
                         reagents: list[str] = None,
                         conditions: dict = None) -> list[str]:
        """
        Send reactants/reagents (SMILES) with optional temperature/pressure/solvent
        and return the predicted product SMILES.
        """
        payload = {
            "reactants": reactants,
            "reagents": reagents or [],
            "conditions": conditions or {},
        }
        data = self.call("/predict_products", payload)
        if not isinstance(data, dict):
            raise ChemServiceError(f"FastAPI returned an unexpected reply on /predict_products: {data!r}")
        products = data.get("products") or []
        if not isinstance(products, list) or not all(isinstance(p, str) for p in products):
            raise ChemServiceError(f"FastAPI returned an unexpected reply on /predict_products: {data!r}")
        return products

    def generate_2d_coordinates(self, smiles: str) -> list[dict]:
        return self.call("/generate_2d", {"smiles": smiles})

    def generate_3d_coordinates(self, smiles: str) -> list[dict]:
        return self.call("/generate_3d", {"smiles": smiles})
