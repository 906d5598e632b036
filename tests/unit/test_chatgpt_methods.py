"""
Unit tests for ChatGPT (OpenAI) method functions.
"""

import inspect
from pathlib import Path

import httpx
import pytest

from ai_connectify.core.exceptions import ProviderRequestError, ValidationError
from ai_connectify.providers.chatgpt import methods

JOB_ID = "ftjob-abc123DEF456ghi789"


class TestModels:
    @pytest.mark.asyncio
    async def test_get_models_returns_data(self, mock_http, throw_error):
        mock_http.get.return_value = {"object": "list", "data": [{"id": "gpt-4o"}]}

        assert await methods.get_models(mock_http, throw_error) == [{"id": "gpt-4o"}]
        mock_http.get.assert_awaited_once_with("/models")

    @pytest.mark.asyncio
    async def test_get_model(self, mock_http, throw_error):
        mock_http.get.return_value = {"id": "gpt-4o", "owned_by": "openai"}

        assert await methods.get_model(mock_http, throw_error, "gpt-4o") == {"id": "gpt-4o", "owned_by": "openai"}
        mock_http.get.assert_awaited_once_with("/models/gpt-4o")

    @pytest.mark.asyncio
    async def test_delete_fine_tuned_model(self, mock_http, throw_error):
        mock_http.delete.return_value = {"id": "ft:gpt-4o-mini:org:custom", "deleted": True}

        result = await methods.delete_fine_tuned_model(mock_http, throw_error, "ft:gpt-4o-mini:org:custom")

        mock_http.delete.assert_awaited_once_with("/models/ft:gpt-4o-mini:org:custom")
        assert result["deleted"] is True


class TestChatCompletion:
    """Tests for create_chat_completion."""

    @pytest.mark.asyncio
    async def test_default_model_and_usage_removed(self, mock_http, throw_error):
        messages = [{"role": "user", "content": "Hi"}]
        mock_http.post.return_value = {"id": "chatcmpl-1", "choices": [], "usage": {"total_tokens": 3}}

        result = await methods.create_chat_completion(mock_http, throw_error, messages)

        mock_http.post.assert_awaited_once_with(
            "/chat/completions", {"model": "gpt-3.5-turbo", "messages": messages}
        )
        assert result == {"id": "chatcmpl-1", "choices": []}

    @pytest.mark.asyncio
    async def test_empty_body(self, mock_http, throw_error):
        mock_http.post.return_value = None

        result = await methods.create_chat_completion(mock_http, throw_error, [{"role": "user", "content": "Hi"}])

        assert result is None
        throw_error.assert_not_called()

    @pytest.mark.asyncio
    async def test_config_cannot_override_messages(self, mock_http, throw_error):
        messages = [{"role": "user", "content": "Hi"}]
        mock_http.post.return_value = {"id": "chatcmpl-1"}

        await methods.create_chat_completion(
            mock_http, throw_error, messages, "gpt-4o", {"messages": [], "temperature": 0.2}
        )

        mock_http.post.assert_awaited_once_with(
            "/chat/completions", {"messages": messages, "temperature": 0.2, "model": "gpt-4o"}
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("messages", [[], None, "Hi"])
    async def test_invalid_messages(self, mock_http, throw_error, messages):
        with pytest.raises(ValidationError, match="Cannot process the messages"):
            await methods.create_chat_completion(mock_http, throw_error, messages)
        mock_http.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_error_goes_to_sink(self, mock_http, raising_sink, response_factory):
        response = response_factory(429, json={"error": {"message": "Rate limit reached"}})
        mock_http.post.side_effect = httpx.HTTPStatusError("429", request=response.request, response=response)

        with pytest.raises(ProviderRequestError) as exc_info:
            await methods.create_chat_completion(mock_http, raising_sink, [{"role": "user", "content": "Hi"}])

        assert exc_info.value.status_code == 429


class TestEmbeddingsAndModeration:
    @pytest.mark.asyncio
    async def test_create_embeddings(self, mock_http, throw_error):
        mock_http.post.return_value = {"data": [{"embedding": [0.1, 0.2]}], "usage": {}}

        result = await methods.create_embeddings(mock_http, throw_error, "hello")

        mock_http.post.assert_awaited_once_with(
            "/embeddings", {"input": "hello", "model": "text-embedding-ada-002"}
        )
        assert result == [{"embedding": [0.1, 0.2]}]

    @pytest.mark.asyncio
    async def test_create_moderation(self, mock_http, throw_error):
        mock_http.post.return_value = {"results": [{"flagged": False}]}

        result = await methods.create_moderation(mock_http, throw_error, ["text one", "text two"])

        mock_http.post.assert_awaited_once_with(
            "/moderations", {"input": ["text one", "text two"], "model": "omni-moderation-latest"}
        )
        assert result == {"results": [{"flagged": False}]}


class TestAudio:
    """Tests for speech, transcription and translation."""

    @pytest.mark.asyncio
    async def test_create_speech_saves_audio(self, mock_http, throw_error, output_dir, response_factory):
        mock_http.post.return_value = response_factory(200, content=b"ID3 audio bytes")

        result = await methods.create_speech(mock_http, throw_error, "Hello there", str(output_dir))

        args, kwargs = mock_http.post.call_args
        assert args == (
            "/audio/speech",
            {"input": "Hello there", "model": "tts-1", "response_format": "mp3", "voice": "alloy"},
        )
        assert kwargs == {"raw": True}

        audio_path = Path(result["audio_path"])
        assert audio_path.parent == output_dir
        assert audio_path.suffix == ".mp3"
        assert audio_path.read_bytes() == b"ID3 audio bytes"
        throw_error.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_speech_uses_format_as_extension(self, mock_http, throw_error, output_dir, response_factory):
        mock_http.post.return_value = response_factory(200, content=b"fLaC")

        result = await methods.create_speech(
            mock_http, throw_error, "Hello", str(output_dir), response_format="flac", voice="nova"
        )

        assert result["audio_path"].endswith(".flac")

    @pytest.mark.asyncio
    async def test_create_speech_error_status(self, mock_http, throw_error, output_dir, response_factory):
        response = response_factory(400, json={"error": {"message": "Invalid voice"}})
        mock_http.post.return_value = response

        assert await methods.create_speech(mock_http, throw_error, "Hello", str(output_dir)) is None
        throw_error.assert_called_once_with(response)
        assert list(output_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_create_speech_error_status_raises_once(self, mock_http, output_dir, response_factory):
        calls = []

        def sink(error):
            calls.append(error)
            raise ProviderRequestError.from_error(error, provider="ChatGPT")

        mock_http.post.return_value = response_factory(500, json={"error": {"message": "server error"}})

        with pytest.raises(ProviderRequestError):
            await methods.create_speech(mock_http, sink, "Hello", str(output_dir))

        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_create_speech_missing_folder(self, mock_http, throw_error, tmp_path):
        with pytest.raises(ValidationError, match="'destination folder' path is invalid"):
            await methods.create_speech(mock_http, throw_error, "Hello", str(tmp_path / "nope"))
        mock_http.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_transcription(self, mock_http, throw_error, tmp_path):
        audio = tmp_path / "speech.mp3"
        audio.write_bytes(b"ID3 fake")
        mock_http.post.return_value = {"text": "Hello world"}

        result = await methods.create_transcription(mock_http, throw_error, str(audio), config={"language": "en"})

        mock_http.post.assert_awaited_once_with(
            "/audio/transcriptions",
            data={"language": "en", "model": "whisper-1"},
            files={"file": ("speech.mp3", b"ID3 fake")},
        )
        assert result == "Hello world"

    @pytest.mark.asyncio
    async def test_create_translation(self, mock_http, throw_error, tmp_path):
        audio = tmp_path / "speech.wav"
        audio.write_bytes(b"RIFF")
        mock_http.post.return_value = {"text": "Good morning"}

        assert await methods.create_translation(mock_http, throw_error, str(audio)) == "Good morning"
        assert mock_http.post.call_args.args == ("/audio/translations",)

    @pytest.mark.asyncio
    async def test_transcription_requires_file_path(self, mock_http, throw_error):
        with pytest.raises(ValidationError, match="Cannot process the file path"):
            await methods.create_transcription(mock_http, throw_error, "")


class TestFineTuningJobs:
    """Tests for fine-tuning job methods."""

    @pytest.mark.asyncio
    async def test_create_fine_tuning_job(self, mock_http, throw_error):
        mock_http.post.return_value = {"id": JOB_ID, "status": "queued"}

        result = await methods.create_fine_tuning_job(
            mock_http, throw_error, "file-abc123", config={"suffix": "custom"}
        )

        mock_http.post.assert_awaited_once_with(
            "/fine_tuning/jobs", {"suffix": "custom", "training_file": "file-abc123", "model": "gpt-4o-mini"}
        )
        assert result["status"] == "queued"

    @pytest.mark.asyncio
    async def test_get_fine_tuning_jobs_passes_params(self, mock_http, throw_error):
        mock_http.get.return_value = {"data": [], "has_more": False}

        await methods.get_fine_tuning_jobs(mock_http, throw_error, {"limit": 2})

        mock_http.get.assert_awaited_once_with("/fine_tuning/jobs", params={"limit": 2})

    @pytest.mark.asyncio
    async def test_job_endpoints(self, mock_http, throw_error):
        mock_http.get.return_value = {"id": JOB_ID}
        mock_http.post.return_value = {"id": JOB_ID, "status": "cancelled"}

        await methods.get_fine_tuning_job(mock_http, throw_error, JOB_ID)
        cancelled = await methods.cancel_fine_tuning_job(mock_http, throw_error, JOB_ID)
        await methods.get_fine_tuning_job_events(mock_http, throw_error, JOB_ID, {"limit": 5})
        await methods.get_fine_tuning_job_checkpoints(mock_http, throw_error, JOB_ID)

        assert cancelled["status"] == "cancelled"
        mock_http.post.assert_awaited_once_with(f"/fine_tuning/jobs/{JOB_ID}/cancel")
        mock_http.get.assert_any_await(f"/fine_tuning/jobs/{JOB_ID}")
        mock_http.get.assert_any_await(f"/fine_tuning/jobs/{JOB_ID}/events", params={"limit": 5})
        mock_http.get.assert_any_await(f"/fine_tuning/jobs/{JOB_ID}/checkpoints", params=None)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("job_id", ["", "short", "has spaces in the job id", None])
    async def test_invalid_job_id(self, mock_http, throw_error, job_id):
        with pytest.raises(ValidationError, match="Cannot process the fine-tuning job ID"):
            await methods.get_fine_tuning_job(mock_http, throw_error, job_id)
        mock_http.get.assert_not_called()


# ============ Request failures ============

MESSAGE = {"role": "user", "content": "Hello"}

# (method name, positional arguments built from the upload file and output folder)
REQUEST_CASES = [
    ("get_models", lambda f, d: ()),
    ("get_model", lambda f, d: ("gpt-4o",)),
    ("delete_fine_tuned_model", lambda f, d: ("ft:gpt-4o-mini:org:custom:id",)),
    ("create_chat_completion", lambda f, d: ([MESSAGE],)),
    ("create_embeddings", lambda f, d: ("hi",)),
    ("create_moderation", lambda f, d: ("hi",)),
    ("create_speech", lambda f, d: ("hi", str(d))),
    ("create_transcription", lambda f, d: (str(f),)),
    ("create_translation", lambda f, d: (str(f),)),
    ("create_fine_tuning_job", lambda f, d: ("file-abc123",)),
    ("get_fine_tuning_jobs", lambda f, d: ()),
    ("get_fine_tuning_job", lambda f, d: (JOB_ID,)),
    ("cancel_fine_tuning_job", lambda f, d: (JOB_ID,)),
    ("get_fine_tuning_job_events", lambda f, d: (JOB_ID,)),
    ("get_fine_tuning_job_checkpoints", lambda f, d: (JOB_ID,)),
]


class TestRequestFailures:
    """Every method hands HTTP and transport failures to the error sink exactly once."""

    def test_every_method_is_covered(self):
        public = {
            name
            for name, func in inspect.getmembers(methods, inspect.iscoroutinefunction)
            if not name.startswith("_") and func.__module__ == methods.__name__
        }
        assert {name for name, _ in REQUEST_CASES} == public

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name, make_args", REQUEST_CASES, ids=[name for name, _ in REQUEST_CASES])
    async def test_failure_goes_to_sink(
        self, mock_http, throw_error, request_failure, upload_file, output_dir, name, make_args
    ):
        for verb in (mock_http.get, mock_http.post, mock_http.patch, mock_http.delete):
            verb.side_effect = request_failure

        result = await getattr(methods, name)(mock_http, throw_error, *make_args(upload_file, output_dir))

        assert result is None
        throw_error.assert_called_once_with(request_failure)
        assert list(output_dir.iterdir()) == []
