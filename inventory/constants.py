DEFAULT_LOW_STOCK_THRESHOLD = 5

PRODUCT_REMOVED_MESSAGE = "Product removed successfully"
LOW_STOCK_ALERT_TEMPLATE = "Low stock alert: Product {sku} has only {quantity} units left"

NEGATIVE_QUANTITY_MESSAGE = "Quantity cannot be negative"
DUPLICATE_SKU_MESSAGE = "Product with this SKU already exists"
PRODUCT_NOT_FOUND_MESSAGE = "Product not found"
