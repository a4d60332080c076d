from typing import List

from .common import KrakenResponse, Model


class OperationStatus(Model):
    """Whether an (de)allocation is still pending."""

    pending: bool


class EarnStrategy(Model):

    id: str
    asset: str
    lock_type: dict
    apr_estimate: dict
    user_min_allocation: str
    can_allocate: bool
    can_deallocate: bool

    def __str__(self) -> str:
        return self.id


class EarnStrategies(Model):

    items: List[EarnStrategy]
    next_cursor: str

    def __init__(self, **data):
        super().__init__(**data)
        self.items = [EarnStrategy(**s) for s in data.get("items", [])]
        self.next_cursor = data.get("next_cursor")


class EarnAllocation(Model):

    strategy_id: str
    native_asset: str
    amount_allocated: dict
    total_rewarded: dict

    def __str__(self) -> str:
        return self.strategy_id


class EarnAllocations(Model):

    converted_asset: str
    total_allocated: str
    total_rewarded: str
    items: List[EarnAllocation]

    def __init__(self, **data):
        super().__init__(**data)
        self.items = [EarnAllocation(**a) for a in data.get("items", [])]


class AllocateEarnFundsResponse(KrakenResponse):
    result: bool


class DeallocateEarnFundsResponse(KrakenResponse):
    result: bool


class AllocationStatusResponse(KrakenResponse):
    result_type = OperationStatus
    result: OperationStatus


class DeallocationStatusResponse(KrakenResponse):
    result_type = OperationStatus
    result: OperationStatus


class ListEarnStrategiesResponse(KrakenResponse):
    result_type = EarnStrategies
    result: EarnStrategies


class ListEarnAllocationsResponse(KrakenResponse):
    result_type = EarnAllocations
    result: EarnAllocations
