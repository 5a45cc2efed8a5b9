from typing import Optional, Union

from pydantic import BaseModel


class AlphabetRequest(BaseModel):
    price: Optional[Union[int, str]] = None


class AlphabetResponse(BaseModel):
    alphabetPrice: str


class NumberRequest(BaseModel):
    alphabetPrice: Optional[str] = None


class NumberResponse(BaseModel):
    numberPrice: str
