class CartLineItem:
    """
    Cart-ready line produced by one "add to cart" action.
    Ownership passes to the external cart store as soon as it is built.
    """

    def __init__(
        self,
        id,
        product_id,
        name,
        brand,
        image,
        quantity,
        original_price,
        discounted_price,
        variant,
        added_at,
        sku=None,
        category=None,
        selected=True,
    ):
        self.id = id
        self.product_id = product_id
        self.name = name
        self.brand = brand
        self.image = image
        self.quantity = quantity
        self.original_price = original_price
        self.discounted_price = discounted_price
        self.variant = variant
        self.added_at = added_at
        self.sku = sku
        self.category = category
        self.selected = selected

    def __repr__(self):
        return f"<CartLineItem {self.product_id} x{self.quantity}>"

    @property
    def line_total(self):
        if self.discounted_price is None:
            return None
        return self.discounted_price * self.quantity

    def to_dict(self):
        return {
            'id': self.id,
            'product_id': self.product_id,
            'name': self.name,
            'brand': self.brand,
            'image': self.image,
            'quantity': self.quantity,
            'original_price': self.original_price,
            'discounted_price': self.discounted_price,
            'variant': dict(self.variant) if self.variant is not None else None,
            'sku': self.sku,
            'category': self.category,
            'selected': self.selected,
            'added_at': self.added_at,
        }
