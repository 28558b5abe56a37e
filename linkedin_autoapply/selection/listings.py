"""Choose which job listings to process"""


def select_listings(listings, run_config, pacer):
    """
    Pick listing indices to process, in processing order.

    More candidates than the application target are picked because many will
    be skipped: up to 3x max_applications, drawn without replacement.
    """
    count = len(listings)
    max_to_process = min(count, run_config.max_candidates)
    return pacer.sample(range(count), max_to_process)
