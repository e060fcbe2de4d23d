"""服务层."""
