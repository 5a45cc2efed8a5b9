from pydantic import BaseModel


class ImageUploaded(BaseModel):
    imagePath: str
