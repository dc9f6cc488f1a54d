"""seo-head - SEO head tag output for web pages.

Selects the presenters a page needs from its type and the site settings,
lets extensions filter them, and prints their tags into the page head.
"""
