"""Application tests for profile updates, role changes and account deletion."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from shopsmart.errors import SelfModificationForbidden
from shopsmart.identity.account.account import Account
from shopsmart.identity.account.administration import ChangeRole, DeleteAccount
from shopsmart.identity.account.profile import UpdateProfile
from shopsmart.ordering.cart.cart import find_cart
from shopsmart.ordering.cart.items import AddToCart
from shopsmart.ordering.order.inventory import place_order
from shopsmart.ordering.order.order import Order
from shopsmart.ordering.wishlist.management import AddToWishlist
from shopsmart.ordering.wishlist.wishlist import find_wishlist
from shopsmart.reviews.feedback.feedback import Feedback
from shopsmart.reviews.feedback.submission import SubmitFeedback


class TestUpdateProfile:
    def test_updates_non_blank_fields(self, make_account):
        account = make_account()
        current_domain.process(
            UpdateProfile(account_id=account.id, name="Jane Smith", address="", phone="555-0199"),
            asynchronous=False,
        )
        updated = current_domain.repository_for(Account).get(account.id)
        assert updated.name == "Jane Smith"
        assert updated.address == "12 Market Street"
        assert updated.phone == "555-0199"


class TestChangeRole:
    def test_admin_promotes_user(self, make_admin, make_account):
        admin, user = make_admin(), make_account()
        current_domain.process(
            ChangeRole(acting_account_id=admin.id, account_id=user.id, role="admin"),
            asynchronous=False,
        )
        assert current_domain.repository_for(Account).get(user.id).is_admin

    def test_admin_cannot_change_own_role(self, make_admin):
        admin = make_admin()
        with pytest.raises(SelfModificationForbidden):
            current_domain.process(
                ChangeRole(acting_account_id=admin.id, account_id=admin.id, role="user"),
                asynchronous=False,
            )
        assert current_domain.repository_for(Account).get(admin.id).is_admin

    def test_invalid_role(self, make_admin, make_account):
        admin, user = make_admin(), make_account()
        with pytest.raises(ValidationError):
            current_domain.process(
                ChangeRole(acting_account_id=admin.id, account_id=user.id, role="owner"),
                asynchronous=False,
            )


class TestDeleteAccount:
    def test_admin_cannot_delete_self(self, make_admin):
        admin = make_admin()
        with pytest.raises(SelfModificationForbidden):
            current_domain.process(
                DeleteAccount(acting_account_id=admin.id, account_id=admin.id),
                asynchronous=False,
            )

    def test_cascades_to_owned_records(self, make_admin, make_account, make_product):
        admin, user = make_admin(), make_account()
        product = make_product(stock=10)

        place_order(user.id, [{"product_id": product.id, "quantity": 1}], "Card")
        current_domain.process(AddToCart(account_id=user.id, product_id=product.id, quantity=1), asynchronous=False)
        current_domain.process(AddToWishlist(account_id=user.id, product_id=product.id), asynchronous=False)
        current_domain.process(
            SubmitFeedback(account_id=user.id, product_id=product.id, rating=4, comment="Nice"),
            asynchronous=False,
        )

        current_domain.process(DeleteAccount(acting_account_id=admin.id, account_id=user.id), asynchronous=False)

        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Account).get(user.id)
        assert current_domain.repository_for(Order)._dao.query.filter(account_id=str(user.id)).all().total == 0
        assert current_domain.repository_for(Feedback)._dao.query.filter(account_id=str(user.id)).all().total == 0
        assert find_cart(user.id) is None
        assert find_wishlist(user.id) is None
