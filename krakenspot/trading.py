from typing import List

from .common import KrakenResponse, Model


class OrderDescription(Model):

    order: str
    close: str

    def __str__(self) -> str:
        return self.order


class AddedOrder(Model):
    """An order accepted by the matching engine.

    Attributes:
        descr (:class:`OrderDescription`): The order's human readable
            description.
        txid (list[str]): The transaction IDs of the order. Empty when the
            order was only validated.

    """

    descr: OrderDescription
    txid: List[str]

    def __init__(self, **data):
        super().__init__(**data)

        if isinstance(getattr(self, "descr", None), dict):
            self.descr = OrderDescription(**self.descr)

        if not hasattr(self, "txid"):
            self.txid = []


class AddedOrderBatch(Model):

    orders: List[AddedOrder]

    def __init__(self, **data):
        super().__init__(**data)
        self.orders = [AddedOrder(**o) for o in data.get("orders", [])]


class EditedOrder(Model):

    descr: OrderDescription
    txid: str
    originaltxid: str
    volume: str
    price: str
    orders_cancelled: int
    status: str

    def __init__(self, **data):
        super().__init__(**data)

        if isinstance(getattr(self, "descr", None), dict):
            self.descr = OrderDescription(**self.descr)


class CancelledOrders(Model):
    """The outcome of a cancellation request.

    Attributes:
        count (int): Number of orders cancelled.
        pending (bool): Whether the cancellation is pending.

    """

    count: int
    pending: bool


class DeadManSwitch(Model):

    current_time: str
    trigger_time: str


class AddOrderResponse(KrakenResponse):
    result_type = AddedOrder
    result: AddedOrder


class AddOrderBatchResponse(KrakenResponse):
    result_type = AddedOrderBatch
    result: AddedOrderBatch


class EditOrderResponse(KrakenResponse):
    result_type = EditedOrder
    result: EditedOrder


class CancelOrderResponse(KrakenResponse):
    result_type = CancelledOrders
    result: CancelledOrders


class CancelAllOrdersResponse(KrakenResponse):
    result_type = CancelledOrders
    result: CancelledOrders


class CancelAllOrdersAfterResponse(KrakenResponse):
    result_type = DeadManSwitch
    result: DeadManSwitch


class CancelOrderBatchResponse(KrakenResponse):
    result_type = CancelledOrders
    result: CancelledOrders

