"""
Custom action form dialogue.

Frame.io custom actions can answer a callback with a form; the user's
answers come back in the next callback. The dialogue is stateless: the
next step is derived from the submitted answers and the declared action
type on every call.

States:
    awaiting-type   -> ask ``copytype`` (export or import)
    awaiting-depth  -> ask ``depth`` (specific assets or entire project)
    awaiting-path   -> ask ``b2path`` (object path in the bucket)
    ready           -> ``None``, the caller proceeds with the transfer

Answers in the submitted data always win over the declared action type.
"""

import logging
import traceback
from typing import Any, Mapping, Optional

from .exceptions import DialogueError
from .models.forms import FormDescriptor, FormField, FormOption
from .utils.constants import (
    COPYTYPE_EXPORT,
    COPYTYPE_IMPORT,
    DEPTH_ASSET,
    DEPTH_PROJECT,
    REQUEST_TYPE_EXPORT,
    REQUEST_TYPE_IMPORT,
    REQUEST_TYPE_IMPORT_EXPORT,
)

COPYTYPE_FORM = FormDescriptor(
    title="Import or Export?",
    description="Import from Backblaze B2, or export to Backblaze B2?",
    fields=[
        FormField(
            type="select",
            label="Import or Export",
            name="copytype",
            options=[
                FormOption(name="Export to Backblaze B2", value=COPYTYPE_EXPORT),
                FormOption(name="Import from Backblaze B2", value=COPYTYPE_IMPORT),
            ],
        )
    ],
)

DEPTH_FORM = FormDescriptor(
    title="Specific Asset(s) or Whole Project?",
    description="Export the specific asset(s) selected or the entire project?",
    fields=[
        FormField(
            type="select",
            label="Specific Asset(s) or Entire Project",
            name="depth",
            options=[
                FormOption(name="Specific Asset(s)", value=DEPTH_ASSET),
                FormOption(name="Entire Project", value=DEPTH_PROJECT),
            ],
        )
    ],
)


def import_path_form(bucket_name: str) -> FormDescriptor:
    """Build the question asking for the object path to import."""
    return FormDescriptor(
        title="Enter the location",
        description=(
            "Please enter the object path to import from Backblaze. "
            f"As a reminder, your bucket name is {bucket_name}. "
            "Only single files are currently supported."
        ),
        fields=[FormField(type="text", label="B2 Path", name="b2path")],
    )


def _answered(answers: Mapping[str, Any], key: str) -> bool:
    return bool(answers.get(key))


def _next_form(data: Optional[Mapping[str, Any]], request_type: str, bucket_name: str) -> Optional[FormDescriptor]:
    if data is not None and not isinstance(data, Mapping):
        raise DialogueError(f"Form data must be an object, got {type(data).__name__}")

    answers = dict(data or {})
    if not answers:
        if request_type == REQUEST_TYPE_IMPORT_EXPORT:
            return COPYTYPE_FORM
        if request_type == REQUEST_TYPE_EXPORT:
            return DEPTH_FORM
        if request_type == REQUEST_TYPE_IMPORT:
            return import_path_form(bucket_name)
        raise DialogueError(f"Unexpected request type {request_type!r} without form data")

    copytype = answers.get("copytype")
    if copytype == COPYTYPE_EXPORT:
        return None if _answered(answers, "depth") else DEPTH_FORM
    if copytype == COPYTYPE_IMPORT:
        return None if _answered(answers, "b2path") else import_path_form(bucket_name)
    if copytype is not None:
        raise DialogueError(f"Unknown copytype {copytype!r}")

    # Blank answers are asked again
    if "b2path" in answers and not _answered(answers, "b2path"):
        return import_path_form(bucket_name)
    if "depth" in answers and not _answered(answers, "depth"):
        return DEPTH_FORM
    return None


def next_form(
    data: Optional[Mapping[str, Any]], request_type: str, bucket_name: str = ""
) -> Optional[FormDescriptor]:
    """
    Decide the next question of the dialogue.

    Args:
        data: Answers submitted with the callback, if any
        request_type: Declared action type (``import-export``, ``export`` or ``import``)
        bucket_name: Bucket name shown in the import question

    Returns:
        The form to send back, or None when the dialogue is complete

    Raises:
        DialogueError: If the submission cannot be interpreted

    Example:
        >>> next_form(None, "import-export").field_names
        ['copytype']
        >>> next_form({"copytype": "export", "depth": "asset"}, "import-export") is None
        True
    """
    try:
        form = _next_form(data, request_type, bucket_name)
    except DialogueError as e:
        logging.error("Form processing failed for type=%r data=%r: %s", request_type, data, e)
        logging.debug("Traceback: %s", traceback.format_exc())
        raise
    except Exception as e:
        logging.error("Unexpected error processing form type=%r data=%r: %s", request_type, data, e)
        logging.error("Traceback: %s", traceback.format_exc())
        raise DialogueError("Form processing failed") from e

    if form is None:
        logging.info("Form dialogue complete: %s", data)
    else:
        logging.info("Asking for %s", ", ".join(form.field_names))
    return form


def _export_direction(answers: Mapping[str, Any]) -> str:
    if answers["depth"] not in (DEPTH_ASSET, DEPTH_PROJECT):
        raise DialogueError(f"Unknown export depth {answers['depth']!r}")
    return COPYTYPE_EXPORT


def resolve_direction(data: Optional[Mapping[str, Any]]) -> str:
    """
    Decide which transfer a completed dialogue asked for.

    An explicit ``copytype`` answer decides the direction; the ``depth`` or
    ``b2path`` answer is only used to infer it when ``copytype`` is absent.

    Args:
        data: Answers of the completed dialogue

    Returns:
        ``"export"`` or ``"import"``

    Raises:
        DialogueError: If the answers name neither direction, lack the answer the
            chosen direction needs, or carry an unknown depth
    """
    answers = dict(data or {})
    copytype = answers.get("copytype")
    if copytype == COPYTYPE_EXPORT:
        if not _answered(answers, "depth"):
            raise DialogueError("Export requested without a depth")
        return _export_direction(answers)
    if copytype == COPYTYPE_IMPORT:
        if not _answered(answers, "b2path"):
            raise DialogueError("Import requested without a b2path")
        return COPYTYPE_IMPORT
    if copytype is not None:
        raise DialogueError(f"Unknown copytype {copytype!r}")

    if _answered(answers, "b2path"):
        return COPYTYPE_IMPORT
    if _answered(answers, "depth"):
        return _export_direction(answers)
    raise DialogueError(f"Cannot tell export from import in form data {answers!r}")


__all__ = ["COPYTYPE_FORM", "DEPTH_FORM", "import_path_form", "next_form", "resolve_direction"]
