from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedFile:
    """A receipt file as received from the client.

    ``content_type`` and ``size`` are the values declared by the client;
    they are what validation runs against.
    """

    content: bytes
    content_type: str
    size: int
    filename: str

    @property
    def is_image(self) -> bool:
        return self.content_type.lower().startswith("image/")
