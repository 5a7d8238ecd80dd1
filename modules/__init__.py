"""Business logic modules for ngx."""
