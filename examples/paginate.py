import asyncio
import logging
from typing import Dict, List, Tuple

from collect_until import Immutable, collect_until, combiner, effect
from collect_until.effect import Effect
from collect_until.logging import get_logger
from collect_until.maybe import Just, Maybe, Nothing

logger = get_logger('paginate')


class Page(Immutable):
    rows: List[str]
    current_page: int
    last_page: int


class API:
    _pages: Dict[int, Page] = {
        n: Page([f'row1-Page{n}', f'row2-Page{n}'], n, 3)
        for n in range(1, 4)
    }

    @effect.catch(KeyError)
    async def fetch_page(self, page: int) -> Page:
        await asyncio.sleep(0.01)  # network latency
        return self._pages[page]


class HasAPI(Immutable):
    api: API


def to_partial(page: Page) -> Tuple[List[str], Maybe[int]]:
    if page.current_page < page.last_page:
        return page.rows, Just(page.current_page + 1)
    return page.rows, Nothing()


def fetch_rows(page: int) -> Effect[HasAPI, KeyError, Tuple[List[str],
                                                            Maybe[int]]]:
    # yapf: disable
    return logger.info(f'fetching page {page}').discard_and_then(
        effect.get_environment(HasAPI).and_then(
            lambda env: env.api.fetch_page(page)
        ).map(to_partial)
    )
    # yapf: enable


fetch_all_rows = collect_until(effect.sequencer, combiner.concat, fetch_rows)

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    print(fetch_all_rows(1).run(HasAPI(API())))
    # pages past the last one fail through the effect
    print(fetch_rows(4).either().run(HasAPI(API())))
