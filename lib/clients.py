# =============================================================================
# lib/clients.py - External Client Context
# =============================================================================
# ServiceContext owns the handles to every external service:
# - supabase: Supabase client (service_role key, bypasses RLS)
# - s3: boto3 S3 client for the media bucket
# - http: httpx client for vendor calls
#
# One context is created per process (see app/dependencies.py) and passed to
# every service. Each handle is built on first use from Settings and then
# reused. A missing configuration value raises ConfigurationError at that
# moment, inside whichever operation asked for the handle.
#
# Construction is cheap and has no side effects, so two requests racing on
# first use may both build a client; one of them is simply discarded.
#
# Usage:
#   context = ServiceContext(settings)
#   context.supabase.table("videos").select("*").execute()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

import boto3
import httpx
from botocore.config import Config
from supabase import Client, create_client

from app.config import Settings

logger = logging.getLogger(__name__)


class ServiceContext:
    """
    Lazily built, memoized external clients for one process.

    Handles passed to the constructor are used as-is (tests pass stubs);
    anything not passed is built from settings on first access.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        supabase: Client | None = None,
        s3: Any | None = None,
        http: httpx.Client | None = None,
    ):
        self.settings = settings
        self._supabase = supabase
        self._s3 = s3
        self._http = http

    # -------------------------------------------------------------------------
    # Database
    # -------------------------------------------------------------------------

    @property
    def supabase(self) -> Client:
        """
        Get or create the Supabase client.

        Raises:
            ConfigurationError: If SUPABASE_URL or SUPABASE_SERVICE_KEY is missing
        """
        if self._supabase is None:
            url = self.settings.require("SUPABASE_URL")
            key = self.settings.require("SUPABASE_SERVICE_KEY")
            self._supabase = create_client(url, key)
            logger.info("Supabase client initialized successfully")
        return self._supabase

    # -------------------------------------------------------------------------
    # Object Storage
    # -------------------------------------------------------------------------

    @property
    def s3(self) -> Any:
        """
        Get or create the S3 client.

        Path-style addressing is forced because most S3-compatible providers
        don't serve virtual-host buckets.

        Raises:
            ConfigurationError: If S3_ACCESS_KEY_ID, S3_SECRET_ACCESS_KEY or
                S3_ENDPOINT is missing
        """
        if self._s3 is None:
            access_key = self.settings.require("S3_ACCESS_KEY_ID")
            secret_key = self.settings.require("S3_SECRET_ACCESS_KEY")
            endpoint = self.settings.require("S3_ENDPOINT")

            session = boto3.session.Session(
                aws_access_key_id=access_key,
                aws_secret_access_key=secret_key,
            )
            config = Config(
                region_name=self.settings.S3_REGION,
                s3={"addressing_style": "path"},
                retries={"max_attempts": 1, "mode": "standard"},
            )
            self._s3 = session.client("s3", endpoint_url=endpoint, config=config)
            logger.info(f"S3 client initialized for endpoint {endpoint}")
        return self._s3

    @property
    def bucket(self) -> str:
        """Name of the media bucket (S3_BUCKET)."""
        return self.settings.require("S3_BUCKET")

    @property
    def storage_endpoint(self) -> str:
        """Base URL of the storage endpoint, without a trailing slash."""
        return self.settings.require("S3_ENDPOINT").rstrip("/")

    # -------------------------------------------------------------------------
    # Vendor HTTP
    # -------------------------------------------------------------------------

    @property
    def http(self) -> httpx.Client:
        """Get or create the shared httpx client used for vendor calls."""
        if self._http is None:
            self._http = httpx.Client()
        return self._http

    @property
    def heygen_api_key(self) -> str:
        """
        HeyGen API key.

        Raises:
            ConfigurationError: If HEYGEN_API_KEY is missing
        """
        return self.settings.require("HEYGEN_API_KEY")

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Release the HTTP connection pool (called on application shutdown)."""
        if self._http is not None:
            self._http.close()
            self._http = None
