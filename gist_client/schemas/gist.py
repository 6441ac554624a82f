"""Pydantic models for gist request bodies.

Only encoding is handled here.  Responses are returned to callers as raw
bytes and never parsed by the client.
"""

from pydantic import BaseModel, Field


class GistFile(BaseModel):
    """A single file inside a gist.

    ``filename`` is carried on the wire as the key of the ``files`` map, so it
    is excluded from the file's own JSON object.
    """

    filename: str = Field(default="", exclude=True)
    content: str


class Gist(BaseModel):
    """A gist as sent to the create and edit endpoints."""

    description: str = ""
    public: bool = False
    files: dict[str, GistFile] = Field(default_factory=dict)
    filename: str = ""

    @classmethod
    def from_files(cls, description: str, public: bool, *files: GistFile) -> "Gist":
        """Build a gist keyed by each file's filename.

        A later file with the same filename replaces an earlier one.
        """
        return cls(
            description=description,
            public=public,
            files={gist_file.filename: gist_file for gist_file in files},
        )

    def to_json(self) -> bytes:
        """Encode the gist as a JSON request body, omitting an empty ``filename``."""
        exclude = None if self.filename else {"filename"}
        return self.model_dump_json(exclude=exclude).encode("utf-8")
