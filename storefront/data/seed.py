# storefront/data/seed.py
from decimal import Decimal

from storefront.data.database import SessionLocal, init_db
from storefront.data.models import CartModel, CustomerModel, ProductModel, SellerModel, SellerPhoneModel
from storefront.utils.logging import configure_logging, get_logger
from storefront.utils.security import hash_password

logger = get_logger(__name__)


def seed():
    db = SessionLocal()
    try:
        # not forcing: only seed if empty
        if db.query(CustomerModel).first():
            logger.info("Database already seeded")
            return

        db.add(SellerModel(
            id="sid100",
            password_hash=hash_password("seller100"),
            name="Sunrise Apparel",
            address="12 Market Road",
            phones=[SellerPhoneModel(phone="9876500001"), SellerPhoneModel(phone="9876500002")],
        ))
        db.add(CartModel(id="crt1011"))
        db.flush()

        db.add_all([
            ProductModel(id="pid1001", type="jeans", color="blue", size="32", gender="M",
                         commission=Decimal("5"), cost=Decimal("10005"), quantity=20, seller_id="sid100"),
            ProductModel(id="pid1002", type="shirt", color="white", size="M", gender="F",
                         commission=Decimal("10"), cost=Decimal("1500"), quantity=35, seller_id="sid100"),
        ])
        db.add(CustomerModel(
            id="cid100",
            password_hash=hash_password("customer100"),
            name="Asha Rao",
            address="4 Lake View",
            pincode="560001",
            phone="9876511111",
            cart_id="crt1011",
        ))
        # items are never seeded as purchased, only checkout may flip them
        db.commit()
        logger.info("Seeded seller sid100, products pid1001/pid1002, customer cid100")
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging()
    init_db()
    seed()
