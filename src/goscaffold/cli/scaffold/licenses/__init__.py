"""License texts, one template per supported license."""
