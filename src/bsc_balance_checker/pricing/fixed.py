"""Fixed BNB/USD price used for rough value estimates."""

from decimal import ROUND_HALF_UP, Decimal

# Rough estimate, not a live price feed
BNB_USD_ESTIMATE = Decimal("600")


class FixedPricing:
    """
    Values BNB amounts at a constant USD price.

    Parameters
    ----------
    price : Decimal
        USD price of one BNB

    """

    def __init__(self, price: Decimal = BNB_USD_ESTIMATE) -> None:
        self.price = price

    def usd_value(self, amount: Decimal) -> Decimal:
        """
        Estimate the USD value of a BNB amount, rounded to cents.

        Parameters
        ----------
        amount : Decimal
            Amount in BNB

        Returns
        -------
        Decimal
            Estimated USD value

        """
        return (amount * self.price).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
