"""FastAPI routes for orders: placement, reads and the admin lifecycle."""

import json

from fastapi import APIRouter, Depends, Response
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.api.security import require_any_role
from storefront.identity.auth.access import authorize_read
from storefront.identity.auth.principal import Principal
from storefront.identity.role.role import Authority
from storefront.identity.user.user import User
from storefront.ordering.api.schemas import (
    ClientResponse,
    OrderItemResponse,
    OrderResponse,
    PaymentResponse,
    PlaceOrderRequest,
)
from storefront.ordering.order.lifecycle import (
    CancelOrder,
    DeliverOrder,
    RecordPayment,
    RemoveOrder,
    ShipOrder,
)
from storefront.ordering.order.order import Order
from storefront.ordering.order.placement import PlaceOrder

router = APIRouter(prefix="/orders", tags=["orders"])

admin_only = require_any_role(Authority.ADMIN)
client_only = require_any_role(Authority.CLIENT)
client_or_admin = require_any_role(Authority.CLIENT, Authority.ADMIN)


def _client_for(client_id) -> ClientResponse:
    try:
        user = current_domain.repository_for(User).get(client_id)
    except ObjectNotFoundError:
        return ClientResponse(id=str(client_id))
    return ClientResponse(id=str(user.id), name=user.name)


def _order_view(order) -> OrderResponse:
    payment = None
    if order.payment is not None:
        payment = PaymentResponse(id=str(order.payment.id), moment=order.payment.moment)

    return OrderResponse(
        id=str(order.id),
        moment=order.moment,
        status=order.status,
        client=_client_for(order.client_id),
        payment=payment,
        items=[
            OrderItemResponse(
                product_id=str(item.product_id),
                name=item.name,
                price=item.price,
                quantity=item.quantity,
                img_url=item.img_url,
                sub_total=item.sub_total,
            )
            for item in order.items or []
        ],
        total=order.total,
    )


def _load(order_id) -> OrderResponse:
    return _order_view(current_domain.repository_for(Order).get(order_id))


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, principal: Principal = Depends(client_or_admin)) -> OrderResponse:
    order = current_domain.repository_for(Order).get(order_id)
    authorize_read(order, principal)
    return _order_view(order)


@router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, principal: Principal = Depends(client_only)) -> OrderResponse:
    command = PlaceOrder(
        client_id=principal.user_id,
        items=json.dumps([line.model_dump() for line in body.items]),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return _load(order_id)


# --- Admin lifecycle ---


@router.put("/{order_id}/payment", response_model=OrderResponse, dependencies=[Depends(admin_only)])
async def record_payment(order_id: str) -> OrderResponse:
    current_domain.process(RecordPayment(order_id=order_id), asynchronous=False)
    return _load(order_id)


@router.put("/{order_id}/ship", response_model=OrderResponse, dependencies=[Depends(admin_only)])
async def ship_order(order_id: str) -> OrderResponse:
    current_domain.process(ShipOrder(order_id=order_id), asynchronous=False)
    return _load(order_id)


@router.put("/{order_id}/deliver", response_model=OrderResponse, dependencies=[Depends(admin_only)])
async def deliver_order(order_id: str) -> OrderResponse:
    current_domain.process(DeliverOrder(order_id=order_id), asynchronous=False)
    return _load(order_id)


@router.put("/{order_id}/cancel", response_model=OrderResponse, dependencies=[Depends(admin_only)])
async def cancel_order(order_id: str) -> OrderResponse:
    current_domain.process(CancelOrder(order_id=order_id), asynchronous=False)
    return _load(order_id)


@router.delete("/{order_id}", status_code=204, dependencies=[Depends(admin_only)])
async def remove_order(order_id: str) -> Response:
    current_domain.process(RemoveOrder(order_id=order_id), asynchronous=False)
    return Response(status_code=204)
