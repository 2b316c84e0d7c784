"""Plant-extract storefront: cart state manager, catalog and impact data."""
