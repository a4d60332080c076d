from typing import List

from .common import KrakenResponse, Model


class DepositMethod(Model):

    method: str
    limit: object
    fee: str
    gen_address: bool
    minimum: str

    def __str__(self) -> str:
        return self.method


class DepositAddress(Model):

    address: str
    expiretm: str
    new: bool

    def __str__(self) -> str:
        return self.address


class TransferStatus(Model):
    """The status of a deposit or a withdrawal.

    Attributes:
        method (str): The funding method.
        aclass (str): The asset class.
        asset (str): The asset.
        refid (str): The reference ID.
        txid (str): The method's transaction ID.
        info (str): The method's transaction information.
        amount (str): The amount transferred.
        fee (str): The fees paid.
        time (int): UNIX timestamp when the request was made.
        status (str): The status of the transfer (e.g. `Success`).

    """

    method: str
    asset: str
    refid: str
    txid: str
    amount: str
    fee: str
    time: int
    status: str

    def __str__(self) -> str:
        return self.refid


class RecentDeposits:
    """A page of recent deposits.

    Requested with `cursor=true`, Kraken wraps the deposits in an object
    alongside the cursor to the next page.

    """

    deposit: List[TransferStatus]
    next_cursor: str

    def __init__(self, deposit=None, next_cursor=None, **data):
        self.deposit = [TransferStatus(**d) for d in deposit or []]
        self.next_cursor = next_cursor

    def __iter__(self):
        return iter(self.deposit)

    def __len__(self) -> int:
        return len(self.deposit)

    def __repr__(self) -> str:
        return f"<RecentDeposits deposit={self.deposit!r} next_cursor={self.next_cursor!r}>"


class WithdrawalMethod(Model):

    asset: str
    method: str
    network: str
    minimum: str

    def __str__(self) -> str:
        return self.method


class WithdrawalAddress(Model):

    address: str
    asset: str
    method: str
    key: str
    verified: bool

    def __str__(self) -> str:
        return self.key


class WithdrawalInformation(Model):

    method: str
    limit: str
    amount: str
    fee: str


class ReferenceID(Model):

    refid: str

    def __str__(self) -> str:
        return self.refid


class DepositMethodsResponse(KrakenResponse):
    result_type = DepositMethod
    result: List[DepositMethod]


class DepositAddressesResponse(KrakenResponse):
    result_type = DepositAddress
    result: List[DepositAddress]


class RecentDepositsResponse(KrakenResponse):
    result_type = RecentDeposits
    result: RecentDeposits


class RecentWithdrawalsResponse(KrakenResponse):
    """Unlike deposits, recent withdrawals are always a plain list."""

    result_type = TransferStatus
    result: List[TransferStatus]


class WithdrawalMethodsResponse(KrakenResponse):
    result_type = WithdrawalMethod
    result: List[WithdrawalMethod]


class WithdrawalAddressesResponse(KrakenResponse):
    result_type = WithdrawalAddress
    result: List[WithdrawalAddress]


class WithdrawalInformationResponse(KrakenResponse):
    result_type = WithdrawalInformation
    result: WithdrawalInformation


class WithdrawFundsResponse(KrakenResponse):
    result_type = ReferenceID
    result: ReferenceID


class WithdrawalCancellationResponse(KrakenResponse):
    result: bool


class WalletTransferResponse(KrakenResponse):
    result_type = ReferenceID
    result: ReferenceID

