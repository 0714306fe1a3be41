"""Helper library for a first-person maze viewer; see the libft sub-package."""

__version__ = "0.1.0"