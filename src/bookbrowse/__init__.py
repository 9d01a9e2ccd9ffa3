# ABOUTME: Bookbrowse - a terminal catalog browser for a fixed collection of books.
# ABOUTME: Filters, paginates, and inspects book records with day/night themes.
