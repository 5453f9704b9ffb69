"""
Share Page Generator
====================

Renders one static HTML page per news item under the share directory.
Crawlers read the Open Graph tags; browsers are redirected to the
front-end with ?news=<id>.
"""

import os
from urllib.parse import quote

from jinja2 import Environment, PackageLoader, select_autoescape

from ...core.logging_service import logger

_env = Environment(
    loader=PackageLoader('newsportal.modules.share', 'templates'),
    autoescape=select_autoescape(['html']),
    keep_trailing_newline=True,
)


# Longest file name most filesystems accept, in bytes
MAX_FILENAME_BYTES = 255


def _text(value):
    if value is None:
        return ''
    return str(value)


def id_text(item_id):
    """Render an id the way the front-end prints it: 1.0 becomes '1'"""
    if isinstance(item_id, float) and item_id.is_integer():
        item_id = int(item_id)
    return _text(item_id)


def artifact_name(item_id):
    """Return the file stem for an id, or None if it cannot be a safe filename"""
    if item_id is None or isinstance(item_id, (bool, dict, list)):
        return None
    name = id_text(item_id)
    if not name or name.startswith('.') or '/' in name or '\\' in name or '\x00' in name:
        return None
    if len(f"{name}.html".encode('utf-8')) > MAX_FILENAME_BYTES:
        return None
    return name


class SharePageGenerator:
    def __init__(self, share_dir, redirect_base='/', lang='pt-br', app_url='',
                 share_url_path='/share', prune_stale=False):
        self.share_dir = share_dir
        self.redirect_base = redirect_base
        self.lang = lang
        self.app_url = (app_url or '').rstrip('/')
        self.share_url_path = share_url_path
        self.prune_stale = prune_stale

    def render(self, item):
        """Render the share page for a single news item"""
        name = artifact_name(item.get('id'))
        share_url = ''
        if self.app_url and name:
            share_url = f"{self.app_url}{self.share_url_path}/{quote(name)}.html"

        return _env.get_template('share/news.html').render(
            lang=self.lang,
            title=_text(item.get('title')),
            excerpt=_text(item.get('excerpt')),
            image=_text(item.get('image')),
            share_url=share_url,
            redirect_url=f"{self.redirect_base}?news={quote(id_text(item.get('id')), safe='')}",
        )

    def _write_if_changed(self, path, content):
        data = content.encode('utf-8')
        if os.path.isfile(path):
            with open(path, 'rb') as f:
                if f.read() == data:
                    return False
        with open(path, 'wb') as f:
            f.write(data)
        return True

    def regenerate_all(self, collection):
        """Write <id>.html for every item in the collection.

        Returns the list of file stems written, in collection order.
        Later items with a duplicate id overwrite earlier ones.
        """
        os.makedirs(self.share_dir, exist_ok=True)

        written = []
        changed = 0
        for item in collection:
            if not isinstance(item, dict):
                logger.warning('share', f"Skipping non-object news entry: {item!r}")
                continue
            name = artifact_name(item.get('id'))
            if name is None:
                logger.warning('share', f"Skipping news item with unusable id: {item.get('id')!r}")
                continue

            path = os.path.join(self.share_dir, f"{name}.html")
            try:
                if self._write_if_changed(path, self.render(item)):
                    changed += 1
            except OSError as e:
                logger.warning('share', f"Could not write share page for id {name!r}: {e}")
                continue
            written.append(name)

        if self.prune_stale:
            self.prune(set(written))

        logger.debug('share', f"Share pages up to date: {len(written)} items, {changed} rewritten")
        return written

    def prune(self, keep):
        """Remove share pages whose id is not in keep. Returns removed stems."""
        removed = []
        if not os.path.isdir(self.share_dir):
            return removed

        for filename in sorted(os.listdir(self.share_dir)):
            stem, ext = os.path.splitext(filename)
            if ext != '.html' or stem in keep:
                continue
            path = os.path.join(self.share_dir, filename)
            if os.path.isfile(path):
                os.unlink(path)
                removed.append(stem)

        if removed:
            logger.info('share', f"Removed {len(removed)} stale share pages", {'ids': removed})
        return removed
