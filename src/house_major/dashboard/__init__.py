"""Admin dashboard core: list/filter/paginate, action menus, forms, screens."""
