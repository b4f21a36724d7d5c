"""
tests/unit/test_enhance_service.py

Unit tests for enhance_prompt() / call_provider().

Verifies:
✔ Valid input reaches the backend exactly once
✔ Invalid input and missing credential make zero backend calls
✔ Outbound request carries fixed model, temperature and two messages
✔ Success output is trimmed; empty output yields the fallback
✔ Provider error kinds map onto the error taxonomy
✔ Backend exceptions surface as Unavailable
"""

import pytest

from enhancer import (
    AuthenticationError,
    ConfigurationError,
    FALLBACK_PROMPT,
    InvalidInputError,
    MODEL_ID,
    QuotaExceededError,
    TEMPERATURE,
    UnavailableError,
    UpstreamError,
    enhance_prompt,
)
from enhancer.validation import EnhanceRequest

VALID = EnhanceRequest(idea="A habit tracker for remote teams", app_type="react-native")


class TestValidationBeforeNetwork:
    @pytest.mark.parametrize("idea", ["", "    "])
    def test_blank_idea_no_call(self, api_key, make_backend, idea):
        backend = make_backend(output="unused")
        with pytest.raises(InvalidInputError):
            enhance_prompt(EnhanceRequest(idea=idea, app_type="web-app"), backend)
        backend.generate.assert_not_called()

    def test_unknown_platform_no_call(self, api_key, make_backend):
        backend = make_backend(output="unused")
        with pytest.raises(InvalidInputError):
            enhance_prompt(EnhanceRequest(idea="idea", app_type="windows-phone"), backend)
        backend.generate.assert_not_called()

    def test_missing_credential_no_call(self, no_api_key, make_backend):
        backend = make_backend(output="unused")
        with pytest.raises(ConfigurationError) as exc:
            enhance_prompt(VALID, backend)
        assert "OPENAI_API_KEY" in exc.value.message
        backend.generate.assert_not_called()

    def test_blank_credential_treated_as_missing(self, monkeypatch, make_backend):
        monkeypatch.setenv("OPENAI_API_KEY", "   ")
        backend = make_backend(output="unused")
        with pytest.raises(ConfigurationError):
            enhance_prompt(VALID, backend)
        backend.generate.assert_not_called()

    def test_invalid_input_wins_over_missing_credential(self, no_api_key, make_backend):
        with pytest.raises(InvalidInputError):
            enhance_prompt(EnhanceRequest(idea="", app_type="web-app"), make_backend(output="x"))


class TestOutboundRequest:
    def test_single_call_with_fixed_settings(self, api_key, make_backend):
        backend = make_backend(output="Title: Foo")
        enhance_prompt(VALID, backend)

        backend.generate.assert_called_once()
        request = backend.generate.call_args.args[0]
        assert request.model == MODEL_ID == "gpt-4o-mini"
        assert request.temperature == TEMPERATURE == 0.4
        assert request.api_key == api_key

    def test_two_role_conversation(self, api_key, make_backend):
        backend = make_backend(output="Title: Foo")
        enhance_prompt(EnhanceRequest(idea="  Solar ops app  ", app_type="native-ios"), backend)

        messages = backend.generate.call_args.args[0].messages
        assert [m.role for m in messages] == ["system", "user"]
        assert "PromptHub" in messages[0].content
        assert "Idea: Solar ops app\n" in messages[1].content
        assert "Target platform: Native iOS" in messages[1].content

    def test_explicit_key_overrides_environment(self, no_api_key, make_backend):
        backend = make_backend(output="ok")
        enhance_prompt(VALID, backend, api_key="sk-injected")
        assert backend.generate.call_args.args[0].api_key == "sk-injected"

    def test_credential_read_per_invocation(self, monkeypatch, make_backend):
        backend = make_backend(output="ok")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-first")
        enhance_prompt(VALID, backend)
        monkeypatch.setenv("OPENAI_API_KEY", "sk-second")
        enhance_prompt(VALID, backend)

        keys = [c.args[0].api_key for c in backend.generate.call_args_list]
        assert keys == ["sk-first", "sk-second"]


class TestResponseMapping:
    def test_output_trimmed(self, api_key, make_backend):
        backend = make_backend(output="\n  Title: Foo\n...  \n")
        assert enhance_prompt(VALID, backend) == "Title: Foo\n..."

    @pytest.mark.parametrize("output", [None, "", "   \n"])
    def test_empty_output_falls_back(self, api_key, make_backend, output):
        assert enhance_prompt(VALID, make_backend(output=output)) == FALLBACK_PROMPT


class TestErrorMapping:
    def test_unauthorized(self, api_key, make_backend, make_provider_error):
        backend = make_backend(error=make_provider_error("unauthorized", "bad key", 401))
        with pytest.raises(AuthenticationError) as exc:
            enhance_prompt(VALID, backend)
        assert "OPENAI_API_KEY" in exc.value.message
        assert exc.value.category == "authentication"

    def test_rate_limited(self, api_key, make_backend, make_provider_error):
        backend = make_backend(error=make_provider_error("rate_limited", "slow down", 429))
        with pytest.raises(QuotaExceededError) as exc:
            enhance_prompt(VALID, backend)
        assert "billing" in exc.value.message
        assert "try again later" in exc.value.message

    def test_other_carries_provider_message(self, api_key, make_backend, make_provider_error):
        backend = make_backend(error=make_provider_error("other", "The model is overloaded", 500))
        with pytest.raises(UpstreamError) as exc:
            enhance_prompt(VALID, backend)
        assert exc.value.message == "The model is overloaded"

    def test_other_without_message_uses_default(self, api_key, make_backend, make_provider_error):
        backend = make_backend(error=make_provider_error("other", None, 500))
        with pytest.raises(UpstreamError) as exc:
            enhance_prompt(VALID, backend)
        assert exc.value.message == UpstreamError.default_message

    def test_transport(self, api_key, make_backend, make_provider_error):
        backend = make_backend(error=make_provider_error("transport", "connection reset"))
        with pytest.raises(UnavailableError) as exc:
            enhance_prompt(VALID, backend)
        assert "retry" in exc.value.message

    def test_backend_exception_is_unavailable(self, api_key, make_backend):
        backend = make_backend(output="unused")
        backend.generate.side_effect = RuntimeError("boom")
        with pytest.raises(UnavailableError):
            enhance_prompt(VALID, backend)
        backend.generate.assert_called_once()

    def test_failures_do_not_poison_next_call(self, api_key, make_backend, make_provider_error):
        failing = make_backend(error=make_provider_error("transport"))
        with pytest.raises(UnavailableError):
            enhance_prompt(VALID, failing)
        assert enhance_prompt(VALID, make_backend(output="Title: Next")) == "Title: Next"
