"""Tests for the Autumn client: construction, headers and HTTP verbs."""

import asyncio
import logging

import httpx
import pytest

from autumn import AUTUMN_API_URL, LATEST_API_VERSION, Autumn, CredentialNotFoundError, Result


class TestAutumnConstruction:
    """Credential and header resolution at construction time."""

    @pytest.mark.unit
    def test_secret_key_only(self):
        """Test a secret key alone produces the full synthesized header set."""
        client = Autumn(secret_key="am_sk_1", environ={})

        assert client.headers == {
            "Authorization": "Bearer am_sk_1",
            "Content-Type": "application/json",
            "x-api-version": LATEST_API_VERSION,
        }

    @pytest.mark.unit
    def test_publishable_key_only(self):
        """Test a publishable key alone is used as the bearer token."""
        client = Autumn(publishable_key="am_pk_1", environ={})

        assert client.headers["Authorization"] == "Bearer am_pk_1"
        assert client.secret_key is None
        assert client.publishable_key == "am_pk_1"

    @pytest.mark.unit
    def test_secret_key_preferred_over_publishable_key(self):
        """Test the secret key wins when both keys are given."""
        client = Autumn(secret_key="am_sk_1", publishable_key="am_pk_1", environ={})

        assert client.headers["Authorization"] == "Bearer am_sk_1"

    @pytest.mark.unit
    def test_keys_from_environment(self, monkeypatch):
        """Test keys are read from the process environment when not given."""
        monkeypatch.setenv("AUTUMN_SECRET_KEY", "am_sk_env")

        client = Autumn()

        assert client.secret_key == "am_sk_env"
        assert client.headers["Authorization"] == "Bearer am_sk_env"

    @pytest.mark.unit
    def test_explicit_key_overrides_environment(self):
        """Test an explicit key takes priority over the environment."""
        client = Autumn(secret_key="am_sk_explicit", environ={"AUTUMN_SECRET_KEY": "am_sk_env"})

        assert client.headers["Authorization"] == "Bearer am_sk_explicit"

    @pytest.mark.unit
    def test_no_credentials_raises(self):
        """Test construction fails when no key resolves and no headers are given."""
        with pytest.raises(CredentialNotFoundError) as exc_info:
            Autumn(environ={})

        assert "secret key or publishable key is required" in str(exc_info.value)
        assert exc_info.value.env_var_names == ("AUTUMN_SECRET_KEY", "AUTUMN_PUBLISHABLE_KEY")

    @pytest.mark.unit
    def test_no_credentials_in_process_environment_raises(self):
        """Test construction fails with an empty process environment."""
        with pytest.raises(CredentialNotFoundError):
            Autumn()

    @pytest.mark.unit
    def test_explicit_headers_replace_credentials(self):
        """Test explicit headers are kept verbatim, plus the version header."""
        headers = {"Authorization": "Bearer custom", "X-Trace": "abc"}

        client = Autumn(headers=headers, environ={})

        assert client.headers == {
            "Authorization": "Bearer custom",
            "X-Trace": "abc",
            "x-api-version": LATEST_API_VERSION,
        }
        # Caller's mapping is left alone
        assert headers == {"Authorization": "Bearer custom", "X-Trace": "abc"}

    @pytest.mark.unit
    def test_explicit_headers_get_version_overwritten(self):
        """Test a caller-supplied version header is replaced by the resolved version."""
        client = Autumn(headers={"x-api-version": "0.1"}, version="1.1", environ={})

        assert client.headers["x-api-version"] == "1.1"

    @pytest.mark.unit
    def test_defaults(self):
        """Test base URL and version default to the published constants."""
        client = Autumn(secret_key="am_sk_1")

        assert client.url == AUTUMN_API_URL
        assert client.version == LATEST_API_VERSION

    @pytest.mark.unit
    def test_url_and_version_overrides(self):
        """Test url and version options override the defaults."""
        client = Autumn(secret_key="am_sk_1", url="http://localhost:8080/v1", version="1.1")

        assert client.url == "http://localhost:8080/v1"
        assert client.headers["x-api-version"] == "1.1"

    @pytest.mark.unit
    def test_headers_property_is_a_copy(self):
        """Test mutating the headers property does not change the client."""
        client = Autumn(secret_key="am_sk_1")

        client.headers["Authorization"] = "tampered"

        assert client.headers["Authorization"] == "Bearer am_sk_1"

    @pytest.mark.unit
    def test_dotenv_file_supplies_key(self, tmp_path):
        """Test a key found only in a .env file is used."""
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("AUTUMN_PUBLISHABLE_KEY=am_pk_dotenv\n")

        client = Autumn(environ={}, dotenv_path=dotenv_file)

        assert client.headers["Authorization"] == "Bearer am_pk_dotenv"


class TestAutumnLogLevel:
    """log_level handling."""

    @pytest.mark.unit
    def test_log_level_applied_to_logger(self):
        """Test a standard level name is applied to the client logger."""
        logger = logging.getLogger("autumn.tests.log_level")

        Autumn(secret_key="am_sk_1", log_level="debug", logger=logger)

        assert logger.level == logging.DEBUG

    @pytest.mark.unit
    def test_numeric_log_level(self):
        """Test a numeric level is applied unchanged."""
        logger = logging.getLogger("autumn.tests.numeric_level")

        Autumn(secret_key="am_sk_1", log_level=logging.WARNING, logger=logger)

        assert logger.level == logging.WARNING

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("name", "level"),
        [("trace", logging.DEBUG), ("warn", logging.WARNING), ("fatal", logging.CRITICAL)],
    )
    def test_non_stdlib_level_names_are_mapped(self, name, level):
        """Test level names unknown to stdlib logging map to the closest level."""
        logger = logging.getLogger(f"autumn.tests.alias_{name}")

        Autumn(secret_key="am_sk_1", log_level=name, logger=logger)

        assert logger.level == level

    @pytest.mark.unit
    def test_unknown_log_level_is_ignored_with_warning(self, caplog):
        """Test an unknown level name never fails construction."""
        logger = logging.getLogger("autumn.tests.unknown_level")
        logger.setLevel(logging.INFO)

        with caplog.at_level(logging.WARNING, logger="autumn.tests.unknown_level"):
            client = Autumn(secret_key="am_sk_1", log_level="verbose", logger=logger)

        assert client.logger is logger
        assert logger.level == logging.INFO
        assert "Ignoring unknown log level 'verbose'" in caplog.text

    @pytest.mark.unit
    def test_log_level_without_logger_sets_package_logger(self):
        """Test log_level without a logger applies to the shared autumn logger."""
        package_logger = logging.getLogger("autumn")
        previous = package_logger.level

        try:
            client = Autumn(secret_key="am_sk_1", log_level="error")

            assert client.logger is package_logger
            assert package_logger.level == logging.ERROR
        finally:
            package_logger.setLevel(previous)


class TestAutumnVerbs:
    """GET/POST/DELETE go out once, with the composed headers, and come back as Results."""

    @pytest.mark.unit
    async def test_get(self, client, requests_seen):
        """Test GET hits base URL plus path exactly once."""
        result = await client.get("/customers/cus_1")

        assert result.ok
        assert result.data["method"] == "GET"
        assert result.data["path"] == "/v1/customers/cus_1"
        assert len(requests_seen) == 1

    @pytest.mark.unit
    async def test_post_sends_json_body(self, client):
        """Test POST serializes the body as JSON."""
        result = await client.post("/track", {"customer_id": "cus_1", "value": 2})

        assert result.data["method"] == "POST"
        assert result.data["body"] == {"customer_id": "cus_1", "value": 2}

    @pytest.mark.unit
    async def test_delete(self, client):
        """Test DELETE is sent without a body."""
        result = await client.delete("/customers/cus_1")

        assert result.data["method"] == "DELETE"
        assert result.data["body"] is None

    @pytest.mark.unit
    async def test_every_request_carries_headers(self, client, requests_seen):
        """Test every verb sends authorization, content type and version headers."""
        await client.get("/features")
        await client.post("/check", {"customer_id": "cus_1"})

        for request in requests_seen:
            assert request.headers["authorization"] == "Bearer am_sk_test"
            assert request.headers["content-type"] == "application/json"
            assert request.headers["x-api-version"] == LATEST_API_VERSION

    @pytest.mark.unit
    async def test_mixed_case_version_header_sent_once(self, echo_transport, requests_seen):
        """Test a caller's X-API-Version header is replaced, so only one value goes out."""
        client = Autumn(
            headers={"Authorization": "Bearer x", "X-API-Version": "0.1"},
            version="1.2",
            environ={},
            transport=echo_transport,
        )

        await client.get("/features")

        assert requests_seen[0].headers.get_list("x-api-version") == ["1.2"]

    @pytest.mark.unit
    async def test_error_status_returns_failure_result(self):
        """Test a non-2xx response comes back as a failure Result, not an exception."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Customer not found", "code": "customer_not_found"})

        client = Autumn(secret_key="am_sk_1", transport=httpx.MockTransport(handler))

        result = await client.get("/customers/missing")

        assert isinstance(result, Result)
        assert result.data is None
        assert result.error.status_code == 404
        assert result.error.code == "customer_not_found"
        assert result.error.message == "Customer not found"

    @pytest.mark.unit
    async def test_failure_is_logged_with_path_and_status(self, caplog):
        """Test failure Results log one error line with method, path and status."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "boom", "code": "internal_error"})

        client = Autumn(secret_key="am_sk_1", transport=httpx.MockTransport(handler))

        with caplog.at_level(logging.ERROR, logger="autumn"):
            await client.post("/attach", {"customer_id": "cus_1"})

        assert "POST /v1/attach failed with 500: boom" in caplog.text

    @pytest.mark.unit
    async def test_transport_error_propagates(self):
        """Test connection failures are raised rather than normalized."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = Autumn(secret_key="am_sk_1", transport=httpx.MockTransport(handler))

        with pytest.raises(httpx.ConnectError):
            await client.get("/features")

    @pytest.mark.unit
    async def test_concurrent_calls_share_one_client(self, client, requests_seen):
        """Test many concurrent calls can share one client."""
        results = await asyncio.gather(*(client.get(f"/features/f{i}") for i in range(5)))

        assert [r.data["path"] for r in results] == [f"/v1/features/f{i}" for i in range(5)]
        assert len(requests_seen) == 5
