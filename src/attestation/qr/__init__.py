from .codec import QrConfig, make_qr, qr_bytes, qr_png_for_config

__all__ = ["QrConfig", "make_qr", "qr_bytes", "qr_png_for_config"]
