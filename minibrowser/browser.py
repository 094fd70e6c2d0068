from minibrowser.parser.css_parser import CSSParser
from minibrowser.parser.html_parser import *
from minibrowser.render_tree import build
from minibrowser.utils.logger import get_logger

logger = get_logger(__name__)

class Page:
    def __init__(self, recover_css=None):
        self.recover_css = recover_css
        self.nodes = None
        self.rules = None
        self.render_tree = None

    def load(self, body, css=None):
        self.render_tree = None
        # Html树
        self.nodes = parse(body)
        # 解析CSS
        if css is None:
            css = extract_style(self.nodes)
        parser = CSSParser(css, recover=self.recover_css)
        self.rules = parser.parse()
        if parser.errors:
            logger.warning("%d stylesheet rules skipped", len(parser.errors))
        self.render_tree = build(self.nodes, self.rules)
        if self.render_tree is None:
            logger.debug("document root excluded from the render tree")
        return self.render_tree
