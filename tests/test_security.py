"""
Security regression tests.

Tests that security headers, CSRF protection, cookie settings and
configuration validation are properly configured and functioning.
"""
import pytest

from workload_app.config import Config, ProductionConfig, TestingConfig, get_config


class TestSecurityHeaders:
    """Test that security headers are configured in production config."""

    def test_production_config_has_security_headers(self):
        """Verify ProductionConfig defines all required security headers."""
        headers = ProductionConfig.SECURITY_HEADERS
        assert headers['X-Content-Type-Options'] == 'nosniff'
        assert headers['X-Frame-Options'] == 'SAMEORIGIN'
        assert 'max-age=' in headers['Strict-Transport-Security']
        assert 'Content-Security-Policy' in headers

    def test_no_headers_outside_production(self):
        assert TestingConfig.SECURITY_HEADERS == {}

    def test_configured_headers_applied_to_responses(self, app, client, monkeypatch):
        """Headers from SECURITY_HEADERS are added to every response."""
        monkeypatch.setitem(app.config, 'SECURITY_HEADERS', ProductionConfig.SECURITY_HEADERS)

        response = client.get('/health/ping')

        for header, value in ProductionConfig.SECURITY_HEADERS.items():
            assert response.headers[header] == value

    def test_error_responses_carry_headers(self, app, client, monkeypatch):
        monkeypatch.setitem(app.config, 'SECURITY_HEADERS', ProductionConfig.SECURITY_HEADERS)

        response = client.get('/api/workload')

        assert response.status_code == 401
        assert response.headers['X-Content-Type-Options'] == 'nosniff'


class TestCSRFProtection:
    """Test that CSRF protection is properly configured."""

    def test_csrf_enabled_in_production(self):
        """Verify WTF_CSRF_ENABLED is True in production config."""
        assert ProductionConfig.WTF_CSRF_ENABLED is True

    def test_session_cookie_security_in_production(self):
        """Verify session cookies have security attributes in production."""
        assert ProductionConfig.SESSION_COOKIE_HTTPONLY is True
        assert ProductionConfig.SESSION_COOKIE_SAMESITE == 'Lax'

    def test_csrf_token_cookie_set_on_response(self, app, client, monkeypatch):
        """Verify CSRF token cookie is set when protection is enabled."""
        monkeypatch.setitem(app.config, 'WTF_CSRF_ENABLED', True)

        response = client.get('/health/ping')

        csrf_cookies = [h for h in response.headers.getlist('Set-Cookie') if 'csrf_token' in h]
        assert csrf_cookies
        assert 'csrf_token=;' not in csrf_cookies[0]

    def test_no_csrf_cookie_when_disabled(self, client):
        response = client.get('/health/ping')
        assert not [h for h in response.headers.getlist('Set-Cookie') if 'csrf_token' in h]

    def test_post_without_token_rejected(self, app, client, login, user_factory, monkeypatch):
        monkeypatch.setitem(app.config, 'WTF_CSRF_ENABLED', True)
        login(user_factory())

        response = client.post('/api/absences', json={
            'title': 'Holiday', 'type': 'vacation',
            'startDate': '2024-07-01', 'endDate': '2024-07-02',
        })

        assert response.status_code == 400
        assert response.get_json()['error'] == 'Bad Request'

    def test_json_responses_do_not_echo_markup(self, client):
        response = client.get('/health/ping')
        assert response.status_code == 200
        assert b'<script>' not in response.data


class TestConfigValidation:
    """Configuration is validated when the app is created."""

    def test_get_config_falls_back_to_development(self):
        assert get_config('unknown').__name__ == 'DevelopmentConfig'

    def test_work_week_days_must_be_positive(self, monkeypatch):
        monkeypatch.setattr(Config, 'WORKLOAD_WORK_WEEK_DAYS', 0)
        with pytest.raises(ValueError):
            Config.validate()

    def test_max_user_ids_must_be_positive(self, monkeypatch):
        monkeypatch.setattr(Config, 'WORKLOAD_MAX_USER_IDS', 0)
        with pytest.raises(ValueError):
            Config.validate()

    def test_production_rejects_short_secret(self, monkeypatch):
        monkeypatch.setenv('SECRET_KEY', 'too-short')
        with pytest.raises(ValueError, match='at least 32'):
            ProductionConfig.validate()

    def test_production_accepts_long_secret(self, monkeypatch):
        monkeypatch.setenv('SECRET_KEY', 'x' * 64)
        ProductionConfig.validate()
