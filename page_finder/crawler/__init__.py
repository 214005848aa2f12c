"""page_finder.crawler: frontier, scope, matching and the crawl loop."""
