"""
Unit tests for DALL-E method functions.
"""

import inspect

import pytest

from ai_connectify.core.exceptions import ValidationError
from ai_connectify.providers.dalle import methods


class TestCreateImage:
    @pytest.mark.asyncio
    async def test_create_image(self, mock_http, throw_error):
        mock_http.post.return_value = {"created": 1, "data": [{"url": "https://img.example.com/1.png"}]}

        result = await methods.create_image(mock_http, throw_error, "a red fox", config={"n": 1, "size": "512x512"})

        mock_http.post.assert_awaited_once_with(
            "/images/generations", {"n": 1, "size": "512x512", "prompt": "a red fox", "model": "dall-e-2"}
        )
        assert result == [{"url": "https://img.example.com/1.png"}]

    @pytest.mark.asyncio
    async def test_create_image_requires_prompt(self, mock_http, throw_error):
        with pytest.raises(ValidationError, match="Cannot process the prompt"):
            await methods.create_image(mock_http, throw_error, "   ")
        mock_http.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_image_failure(self, mock_http, throw_error):
        failure = KeyError("data")
        mock_http.post.side_effect = failure

        assert await methods.create_image(mock_http, throw_error, "a red fox") is None
        throw_error.assert_called_once_with(failure)


class TestImageEdits:
    """Tests for edits and variations, which upload files."""

    @pytest.mark.asyncio
    async def test_create_image_edit_with_mask(self, mock_http, throw_error, upload_file, tmp_path):
        mask = tmp_path / "mask.png"
        mask.write_bytes(b"\x89PNG mask")
        mock_http.post.return_value = {"data": [{"b64_json": "abc"}]}

        result = await methods.create_image_edit(
            mock_http, throw_error, str(upload_file), "add a hat", config={"mask": str(mask), "n": 2}
        )

        mock_http.post.assert_awaited_once_with(
            "/images/edits",
            data={"n": "2", "prompt": "add a hat", "model": "dall-e-2"},
            files={
                "image": ("upload.png", b"\x89PNG fake image"),
                "mask": ("mask.png", b"\x89PNG mask"),
            },
        )
        assert result == [{"b64_json": "abc"}]

    @pytest.mark.asyncio
    async def test_create_image_edit_without_mask(self, mock_http, throw_error, upload_file):
        mock_http.post.return_value = {"data": []}

        await methods.create_image_edit(mock_http, throw_error, str(upload_file), "add a hat")

        assert set(mock_http.post.call_args.kwargs["files"]) == {"image"}

    @pytest.mark.asyncio
    async def test_create_image_edit_invalid_mask(self, mock_http, throw_error, upload_file):
        with pytest.raises(ValidationError, match="Cannot process the image mask path"):
            await methods.create_image_edit(mock_http, throw_error, str(upload_file), "add a hat", config={"mask": ""})
        mock_http.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_image_edit_does_not_mutate_config(self, mock_http, throw_error, upload_file, tmp_path):
        mask = tmp_path / "mask.png"
        mask.write_bytes(b"m")
        config = {"mask": str(mask)}
        mock_http.post.return_value = {"data": []}

        await methods.create_image_edit(mock_http, throw_error, str(upload_file), "add a hat", config=config)

        assert config == {"mask": str(mask)}

    @pytest.mark.asyncio
    async def test_create_image_variation(self, mock_http, throw_error, upload_file):
        mock_http.post.return_value = {"data": [{"url": "https://img.example.com/v.png"}]}

        result = await methods.create_image_variation(mock_http, throw_error, str(upload_file), config={"n": 1})

        mock_http.post.assert_awaited_once_with(
            "/images/variations",
            data={"n": "1", "model": "dall-e-2"},
            files={"image": ("upload.png", b"\x89PNG fake image")},
        )
        assert len(result) == 1

    @pytest.mark.asyncio
    async def test_create_image_variation_missing_file(self, mock_http, throw_error, tmp_path):
        assert await methods.create_image_variation(mock_http, throw_error, str(tmp_path / "missing.png")) is None
        assert isinstance(throw_error.call_args.args[0], FileNotFoundError)


class TestModels:
    @pytest.mark.asyncio
    async def test_get_models_and_model(self, mock_http, throw_error):
        mock_http.get.side_effect = [{"data": [{"id": "dall-e-3"}]}, {"id": "dall-e-3"}]

        assert await methods.get_models(mock_http, throw_error) == [{"id": "dall-e-3"}]
        assert await methods.get_model(mock_http, throw_error, "dall-e-3") == {"id": "dall-e-3"}


# ============ Request failures ============

# (method name, positional arguments built from the upload file path)
REQUEST_CASES = [
    ("get_models", lambda f: ()),
    ("get_model", lambda f: ("dall-e-3",)),
    ("create_image", lambda f: ("a red fox",)),
    ("create_image_edit", lambda f: (str(f), "add a hat")),
    ("create_image_variation", lambda f: (str(f),)),
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
    async def test_failure_goes_to_sink(self, mock_http, throw_error, request_failure, upload_file, name, make_args):
        for verb in (mock_http.get, mock_http.post, mock_http.patch, mock_http.delete):
            verb.side_effect = request_failure

        result = await getattr(methods, name)(mock_http, throw_error, *make_args(upload_file))

        assert result is None
        throw_error.assert_called_once_with(request_failure)
