from fastapi import APIRouter, HTTPException

from inventory_api.core.encoding import PriceFormatError, alphabet_encode, number_decode
from inventory_api.schemas.encoding import (
    AlphabetRequest,
    AlphabetResponse,
    NumberRequest,
    NumberResponse,
)

router = APIRouter(prefix="/api", tags=["Encoding"])


@router.post("/switch-to-alphabet", response_model=AlphabetResponse)
def switch_to_alphabet(payload: AlphabetRequest):
    if payload.price is None or payload.price == "":
        raise HTTPException(status_code=400, detail="Price is required")
    try:
        alphabet_price = alphabet_encode(payload.price)
    except PriceFormatError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return AlphabetResponse(alphabetPrice=alphabet_price)


@router.post("/switch-to-number", response_model=NumberResponse)
def switch_to_number(payload: NumberRequest):
    if not payload.alphabetPrice:
        raise HTTPException(status_code=400, detail="Alphabet price is required")
    try:
        number_price = number_decode(payload.alphabetPrice)
    except PriceFormatError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return NumberResponse(numberPrice=number_price)


__all__ = ["router"]
