"""steem:// producer example.

FastAPI service that hands out signing URIs and receives the wallet's
callback once the transaction was signed (and broadcast).

Run with: uvicorn main:app --port 4030
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from steem_uri import (
    Parameters,
    SteemUriError,
    TransactionConfirmation,
    encode_alias,
    encode_op,
)

load_dotenv()

logging.basicConfig(level=os.getenv("STEEM_URI_LOG_LEVEL", "INFO").upper())
logger = logging.getLogger("producer")

# Config
PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:4030")
PAY_TO = os.getenv("PAY_TO")

if not PAY_TO:
    raise ValueError("PAY_TO is required")

CALLBACK_URL = f"{PUBLIC_URL}/callback?sig={{{{sig}}}}&id={{{{id}}}}&block={{{{block}}}}&txn={{{{txn}}}}"


# Request / response schemas
class TransferRequest(BaseModel):
    amount: str
    memo: str = ""
    signer: str | None = None


class VoteRequest(BaseModel):
    author: str
    permlink: str
    weight: int = 10000
    signer: str | None = None
    no_broadcast: bool = False


class SigningUriResponse(BaseModel):
    uri: str


class CallbackResponse(BaseModel):
    status: str
    confirmation: dict


# App
app = FastAPI()


@app.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/transfer")
async def create_transfer(request: TransferRequest) -> SigningUriResponse:
    params = Parameters(signer=request.signer, callback=CALLBACK_URL)
    try:
        uri = encode_alias("transfer", [PAY_TO, request.amount, request.memo], params)
    except SteemUriError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return SigningUriResponse(uri=uri)


@app.post("/vote")
async def create_vote(request: VoteRequest) -> SigningUriResponse:
    op = [
        "vote",
        {
            "voter": "__signer",
            "author": request.author,
            "permlink": request.permlink,
            "weight": request.weight,
        },
    ]
    params = Parameters(
        signer=request.signer, callback=CALLBACK_URL, no_broadcast=request.no_broadcast
    )
    return SigningUriResponse(uri=encode_op(op, params))


@app.get("/callback")
async def callback(
    sig: str, id: str = "", block: str = "", txn: str = ""
) -> CallbackResponse:
    # Empty values mean the wallet only signed
    confirmation = TransactionConfirmation(
        sig=sig,
        id=id or None,
        block=int(block) if block else None,
        txn=int(txn) if txn else None,
    )
    status = "broadcast" if confirmation.id else "signed"
    logger.info("Received %s confirmation %s", status, confirmation.to_dict())
    return CallbackResponse(status=status, confirmation=confirmation.to_dict())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=4030)
