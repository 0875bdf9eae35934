"""Request listeners."""
from pagewright.listener.request_listener import RequestListener, configure_seo_page

__all__ = ["RequestListener", "configure_seo_page"]
