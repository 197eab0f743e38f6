"""Demo data for local runs and HTTP tests.

Mirrors the storefront's reference data set: three categories, a handful of
products, three users with the client/admin role mix, and three orders.
Must run inside the storefront domain context.
"""

from datetime import UTC, date, datetime

from protean.utils.globals import current_domain

from storefront.catalogue.category.management import CreateCategory
from storefront.catalogue.product.management import CreateProduct
from storefront.catalogue.product.product import Product
from storefront.identity.role.role import Authority
from storefront.identity.user.registration import RegisterUser
from storefront.ordering.order.order import Order, OrderItem, OrderStatus, Payment
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_PASSWORD = "123456"

_IMG = "https://raw.githubusercontent.com/devsuperior/dscatalog-resources/master/backend/img/{}-big.jpg"
_LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua."
)

CATEGORIES = ["Books", "Electronics", "Computers"]

PRODUCTS = [
    ("The Lord of the Rings", 90.5, 1, ["Books"]),
    ("Smart TV", 2190.0, 2, ["Electronics", "Computers"]),
    ("Macbook Pro", 1250.0, 3, ["Computers"]),
    ("PC Gamer", 1200.0, 4, ["Computers"]),
    ("Rails for Dummies", 100.99, 5, ["Books"]),
    ("PC Gamer Ex", 1350.0, 6, ["Computers"]),
]

USERS = [
    ("Maria Brown", "maria@gmail.com", "988888888", date(2001, 7, 25), [Authority.CLIENT]),
    ("Alex Green", "alex@gmail.com", "977777777", date(1987, 12, 13), [Authority.CLIENT, Authority.ADMIN]),
    ("Ana Gray", "ana@gmail.com", "966666666", date(1990, 1, 1), [Authority.ADMIN]),
]


def _order(client_id, moment, status, lines, paid_at=None):
    """Build an order with a fixed timestamp and status, bypassing placement."""
    items = [
        OrderItem(
            product_id=product.id,
            name=product.name,
            img_url=product.img_url,
            quantity=quantity,
            price=product.price,
        )
        for product, quantity in lines
    ]
    order = Order(moment=moment, status=status.value, client_id=client_id, items=items)
    if paid_at is not None:
        order.payment = Payment(moment=paid_at)
    return order


def seed_demo_data() -> dict:
    """Load the demo data set and return the generated ids, keyed by natural name."""
    categories = {
        name: current_domain.process(CreateCategory(name=name), asynchronous=False) for name in CATEGORIES
    }

    products = {}
    for name, price, image, category_names in PRODUCTS:
        products[name] = current_domain.process(
            CreateProduct(
                name=name,
                description=_LOREM,
                price=price,
                img_url=_IMG.format(image),
                category_ids=[categories[c] for c in category_names],
            ),
            asynchronous=False,
        )

    users = {}
    for name, email, phone, birth_date, authorities in USERS:
        users[email] = current_domain.process(
            RegisterUser(
                name=name,
                email=email,
                password=DEMO_PASSWORD,
                phone=phone,
                birth_date=birth_date,
                authorities=[authority.value for authority in authorities],
            ),
            asynchronous=False,
        )

    catalogue = current_domain.repository_for(Product)
    lotr = catalogue.get(products["The Lord of the Rings"])
    macbook = catalogue.get(products["Macbook Pro"])
    tv = catalogue.get(products["Smart TV"])

    orders_repo = current_domain.repository_for(Order)
    seeded = [
        (
            "maria_paid",
            _order(
                users["maria@gmail.com"],
                datetime(2022, 7, 25, 13, 0, tzinfo=UTC),
                OrderStatus.PAID,
                [(lotr, 2), (macbook, 1)],
                paid_at=datetime(2022, 7, 25, 15, 0, tzinfo=UTC),
            ),
        ),
        (
            "alex_delivered",
            _order(
                users["alex@gmail.com"],
                datetime(2022, 7, 29, 15, 50, tzinfo=UTC),
                OrderStatus.DELIVERED,
                [(tv, 1)],
                paid_at=datetime(2022, 7, 30, 11, 0, tzinfo=UTC),
            ),
        ),
        (
            "maria_waiting",
            _order(
                users["maria@gmail.com"],
                datetime(2022, 8, 3, 14, 20, tzinfo=UTC),
                OrderStatus.WAITING_PAYMENT,
                [(macbook, 1)],
            ),
        ),
    ]
    orders = {}
    for key, order in seeded:
        orders_repo.add(order)
        orders[key] = str(order.id)

    logger.info(
        "seed.loaded",
        categories=len(categories),
        products=len(products),
        users=len(users),
        orders=len(orders),
    )
    return {"categories": categories, "products": products, "users": users, "orders": orders}
