from .exceptions import InvariantViolation

def assert_sibling_order(siblings):
    orders = [page.display_order for page in siblings]
    if not orders:
        return

    expected = list(range(len(orders)))
    if sorted(orders) != expected:
        raise InvariantViolation(
            f"Sibling orders are not consecutive starting from 0: {orders}"
        )
