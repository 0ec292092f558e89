"""HTML5 and Svelte element/attribute data used for hover and completion."""

from __future__ import annotations

from svelte_html_lsp.constants import VOID_ELEMENTS
from svelte_html_lsp.models import AttributeInfo, TagInfo

MDN_ELEMENT_URL = "https://developer.mozilla.org/docs/Web/HTML/Element/{}"
MDN_GLOBAL_ATTRIBUTE_URL = "https://developer.mozilla.org/docs/Web/HTML/Global_attributes/{}"
SVELTE_DOCS_URL = "https://svelte.dev/docs#{}"

HEADING_ELEMENTS = ("h1", "h2", "h3", "h4", "h5", "h6")

# (name, description, element specific attributes as "name" or "name:valueset")
_HTML_TAGS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("html", "The html element represents the root of an HTML document.", ("manifest", "version", "xmlns")),
    ("head", "The head element represents a collection of metadata for the Document.", ("profile",)),
    ("title", "The title element represents the document's title or name.", ()),
    ("base", "The base element allows authors to specify the document base URL.", ("href", "target:target")),
    ("link", "The link element allows authors to link their document to other resources.", ("href", "crossorigin:xo", "rel", "media", "hreflang", "type", "sizes", "as", "integrity")),
    ("meta", "The meta element represents various kinds of metadata that cannot be expressed using the title, base, link, style, and script elements.", ("name", "http-equiv", "content", "charset")),
    ("style", "The style element allows authors to embed style information in their documents.", ("media", "nonce", "type", "scoped:v", "lang")),
    ("body", "The body element represents the content of the document.", ("onafterprint", "onbeforeprint", "onbeforeunload", "onhashchange", "onmessage", "onoffline", "ononline", "onpagehide", "onpageshow", "onpopstate", "onstorage", "onunload")),
    ("article", "The article element represents a complete, or self-contained, composition in a document, page, application, or site.", ()),
    ("section", "The section element represents a generic section of a document or application.", ()),
    ("nav", "The nav element represents a section of a page that links to other pages or to parts within the page.", ()),
    ("aside", "The aside element represents a section of a page that consists of content that is tangentially related to the content around the aside element.", ()),
    ("h1", "The h1 element represents a section heading.", ()),
    ("h2", "The h2 element represents a section heading.", ()),
    ("h3", "The h3 element represents a section heading.", ()),
    ("h4", "The h4 element represents a section heading.", ()),
    ("h5", "The h5 element represents a section heading.", ()),
    ("h6", "The h6 element represents a section heading.", ()),
    ("header", "The header element represents introductory content for its nearest ancestor sectioning content or sectioning root element.", ()),
    ("footer", "The footer element represents a footer for its nearest ancestor sectioning content or sectioning root element.", ()),
    ("address", "The address element represents the contact information for its nearest article or body element ancestor.", ()),
    ("p", "The p element represents a paragraph.", ()),
    ("hr", "The hr element represents a paragraph-level thematic break.", ()),
    ("pre", "The pre element represents a block of preformatted text, in which structure is represented by typographic conventions rather than by elements.", ()),
    ("blockquote", "The blockquote element represents content that is quoted from another source.", ("cite",)),
    ("ol", "The ol element represents a list of items, where the items have been intentionally ordered.", ("reversed:v", "start", "type:lt")),
    ("ul", "The ul element represents a list of items, where the order of the items is not important.", ()),
    ("li", "The li element represents a list item.", ("value",)),
    ("dl", "The dl element represents an association list consisting of zero or more name-value groups.", ()),
    ("dt", "The dt element represents the term, or name, part of a term-description group in a description list.", ()),
    ("dd", "The dd element represents the description, definition, or value, part of a term-description group in a description list.", ()),
    ("figure", "The figure element represents some flow content, optionally with a caption, that is self-contained.", ()),
    ("figcaption", "The figcaption element represents a caption or legend for the rest of the contents of the figcaption element's parent figure element.", ()),
    ("main", "The main element represents the main content of the body of a document or application.", ()),
    ("div", "The div element has no special meaning at all. It represents its children.", ()),
    ("a", "If the a element has an href attribute, then it represents a hyperlink labeled by its contents.", ("href", "target:target", "download", "ping", "rel", "hreflang", "type", "referrerpolicy")),
    ("em", "The em element represents stress emphasis of its contents.", ()),
    ("strong", "The strong element represents strong importance, seriousness, or urgency for its contents.", ()),
    ("small", "The small element represents side comments such as small print.", ()),
    ("s", "The s element represents contents that are no longer accurate or no longer relevant.", ()),
    ("cite", "The cite element represents a reference to a creative work.", ()),
    ("q", "The q element represents some phrasing content quoted from another source.", ("cite",)),
    ("dfn", "The dfn element represents the defining instance of a term.", ()),
    ("abbr", "The abbr element represents an abbreviation or acronym, optionally with its expansion.", ()),
    ("data", "The data element represents its contents, along with a machine-readable form of those contents in the value attribute.", ("value",)),
    ("time", "The time element represents its contents, along with a machine-readable form of those contents in the datetime attribute.", ("datetime",)),
    ("code", "The code element represents a fragment of computer code.", ()),
    ("var", "The var element represents a variable.", ()),
    ("samp", "The samp element represents sample or quoted output from another program or computing system.", ()),
    ("kbd", "The kbd element represents user input (typically keyboard input, although it may also be used to represent other input, such as voice commands).", ()),
    ("sub", "The sub element represents a subscript.", ()),
    ("sup", "The sup element represents a superscript.", ()),
    ("i", "The i element represents a span of text in an alternate voice or mood, or otherwise offset from the normal prose in a manner indicating a different quality of text.", ()),
    ("b", "The b element represents a span of text to which attention is being drawn for utilitarian purposes without conveying any extra importance.", ()),
    ("u", "The u element represents a span of text with an unarticulated, though explicitly rendered, non-textual annotation.", ()),
    ("mark", "The mark element represents a run of text in one document marked or highlighted for reference purposes, due to its relevance in another context.", ()),
    ("bdi", "The bdi element represents a span of text that is to be isolated from its surroundings for the purposes of bidirectional text formatting.", ()),
    ("bdo", "The bdo element represents explicit text directionality formatting control for its children.", ()),
    ("span", "The span element doesn't mean anything on its own, but can be useful when used together with the global attributes.", ()),
    ("br", "The br element represents a line break.", ("clear",)),
    ("wbr", "The wbr element represents a line break opportunity.", ()),
    ("ins", "The ins element represents an addition to the document.", ("cite", "datetime")),
    ("del", "The del element represents a removal from the document.", ("cite", "datetime")),
    ("picture", "The picture element is a container which provides multiple sources to its contained img element to allow authors to declaratively control or give hints to the user agent about which image resource to use.", ()),
    ("img", "An img element represents an image.", ("alt", "src", "srcset", "crossorigin:xo", "usemap", "ismap:v", "width", "height", "decoding:decoding", "loading:loading", "referrerpolicy", "sizes")),
    ("iframe", "The iframe element represents a nested browsing context.", ("src", "srcdoc", "name", "sandbox:sb", "allow", "allowfullscreen:v", "width", "height", "referrerpolicy", "loading:loading")),
    ("embed", "The embed element provides an integration point for an external (typically non-HTML) application or interactive content.", ("src", "type", "width", "height")),
    ("object", "The object element can represent an external resource, which, depending on the type of the resource, will either be treated as an image, as a nested browsing context, or as an external resource to be processed by a plugin.", ("data", "type", "name", "usemap", "form", "width", "height")),
    ("param", "The param element defines parameters for plugins invoked by object elements. It does not represent anything on its own.", ("name", "value")),
    ("video", "A video element is used for playing videos or movies, and audio files with captions.", ("src", "crossorigin:xo", "poster", "preload:pl", "autoplay:v", "playsinline:v", "loop:v", "muted:v", "controls:v", "width", "height")),
    ("audio", "An audio element represents a sound or audio stream.", ("src", "crossorigin:xo", "preload:pl", "autoplay:v", "loop:v", "muted:v", "controls:v")),
    ("source", "The source element allows authors to specify multiple alternative media resources for media elements. It does not represent anything on its own.", ("src", "type", "sizes", "srcset", "media")),
    ("track", "The track element allows authors to specify explicit external timed text tracks for media elements. It does not represent anything on its own.", ("default:v", "kind:tk", "label", "src", "srclang")),
    ("map", "The map element, in conjunction with an img element and any area element descendants, defines an image map. The element represents its children.", ("name",)),
    ("area", "The area element represents either a hyperlink with some text and a corresponding area on an image map, or a dead area on an image map.", ("alt", "coords", "shape:sh", "href", "target:target", "download", "ping", "rel", "referrerpolicy")),
    ("table", "The table element represents data with more than one dimension, in the form of a table.", ("border",)),
    ("caption", "The caption element represents the title of the table that is its parent, if it has a parent and that is a table element.", ()),
    ("colgroup", "The colgroup element represents a group of one or more columns in the table that is its parent, if it has a parent and that is a table element.", ("span",)),
    ("col", "If a col element has a parent and that is a colgroup element that itself has a parent that is a table element, then the col element represents one or more columns in the column group represented by that colgroup.", ("span",)),
    ("tbody", "The tbody element represents a block of rows that consist of a body of data for the parent table element, if the tbody element has a parent and it is a table.", ()),
    ("thead", "The thead element represents the block of rows that consist of the column labels (headers) for the parent table element, if the thead element has a parent and it is a table.", ()),
    ("tfoot", "The tfoot element represents the block of rows that consist of the column summaries (footers) for the parent table element, if the tfoot element has a parent and it is a table.", ()),
    ("tr", "The tr element represents a row of cells in a table.", ()),
    ("td", "The td element represents a data cell in a table.", ("colspan", "rowspan", "headers")),
    ("th", "The th element represents a header cell in a table.", ("colspan", "rowspan", "headers", "scope:s", "abbr")),
    ("form", "The form element represents a collection of form-associated elements, some of which can represent editable values that can be submitted to a server for processing.", ("accept-charset", "action", "autocomplete:o", "enctype:et", "method:m", "name", "novalidate:v", "target:target")),
    ("label", "The label element represents a caption in a user interface. The caption can be associated with a specific form control, known as the label element's labeled control, either using the for attribute, or by putting the form control inside the label element itself.", ("form", "for")),
    ("input", "The input element represents a typed data field, usually with a form control to allow the user to edit the data.", ("accept", "alt", "autocomplete:inputautocomplete", "autofocus:v", "checked:v", "dirname", "disabled:v", "form", "formaction", "formenctype:et", "formmethod:fm", "formnovalidate:v", "formtarget", "height", "inputmode:im", "list", "max", "maxlength", "min", "minlength", "multiple:v", "name", "pattern", "placeholder", "readonly:v", "required:v", "size", "src", "step", "type:t", "value", "width")),
    ("button", "The button element represents a button labeled by its contents.", ("autofocus:v", "disabled:v", "form", "formaction", "formenctype:et", "formmethod:fm", "formnovalidate:v", "formtarget", "name", "type:bt", "value")),
    ("select", "The select element represents a control for selecting amongst a set of options.", ("autocomplete:inputautocomplete", "autofocus:v", "disabled:v", "form", "multiple:v", "name", "required:v", "size")),
    ("datalist", "The datalist element represents a set of option elements that represent predefined options for other controls. In the rendering, the datalist element represents nothing and it, along with its children, should be hidden.", ()),
    ("optgroup", "The optgroup element represents a group of option elements with a common label.", ("disabled:v", "label")),
    ("option", "The option element represents an option in a select element or as part of a list of suggestions in a datalist element.", ("disabled:v", "label", "selected:v", "value")),
    ("textarea", "The textarea element represents a multiline plain text edit control for the element's raw value. The contents of the control represent the control's default value.", ("autocomplete:inputautocomplete", "autofocus:v", "cols", "dirname", "disabled:v", "form", "inputmode:im", "maxlength", "minlength", "name", "placeholder", "readonly:v", "required:v", "rows", "wrap:w")),
    ("output", "The output element represents the result of a calculation performed by the application, or the result of a user action.", ("for", "form", "name")),
    ("progress", "The progress element represents the completion progress of a task. The progress is either indeterminate, indicating that progress is being made but that it is not clear how much more work remains to be done before the task is complete, or the progress is a number in the range zero to a maximum, giving the fraction of work that has so far been completed.", ("value", "max")),
    ("meter", "The meter element represents a scalar measurement within a known range, or a fractional value; for example disk usage, the relevance of a query result, or the fraction of a voting population to have selected a particular candidate.", ("value", "min", "max", "low", "high", "optimum")),
    ("fieldset", "The fieldset element represents a set of form controls optionally grouped under a common name.", ("disabled:v", "form", "name")),
    ("legend", "The legend element represents a caption for the rest of the contents of the legend element's parent fieldset element, if any.", ()),
    ("details", "The details element represents a disclosure widget from which the user can obtain additional information or controls.", ("open:v",)),
    ("summary", "The summary element represents a summary, caption, or legend for the rest of the contents of the summary element's parent details element, if any.", ()),
    ("dialog", "The dialog element represents a part of an application that a user interacts with to perform a task, for example a dialog box, inspector, or window.", ("open",)),
    ("script", "The script element allows authors to include dynamic script and data blocks in their documents. The element does not represent content for the user.", ("src", "type", "charset", "async:v", "defer:v", "crossorigin:xo", "nonce", "integrity", "nomodule:v", "referrerpolicy", "context", "lang")),
    ("noscript", "The noscript element represents nothing if scripting is enabled, and represents its children if scripting is disabled. It is used to present different markup to user agents that support scripting and those that don't support scripting, by affecting how the document is parsed.", ()),
    ("template", "The template element is used to declare fragments of HTML that can be cloned and inserted in the document by script.", ("lang",)),
    ("canvas", "The canvas element provides scripts with a resolution-dependent bitmap canvas, which can be used for rendering graphs, game graphics, art, or other visual images on the fly.", ("width", "height")),
    ("slot", "The slot element is a placeholder inside a web component that you can fill with your own markup, which lets you create separate DOM trees and present them together.", ("name",)),
)

_GLOBAL_ATTRIBUTES: tuple[tuple[str, str, str | None], ...] = (
    ("accesskey", "Provides a hint for generating a keyboard shortcut for the current element.", None),
    ("autocapitalize", "Controls whether and how text input is automatically capitalized as it is entered/edited by the user.", None),
    ("class", "A space-separated list of the classes of the element.", None),
    ("contenteditable", "An enumerated attribute indicating if the element should be editable by the user.", None),
    ("dir", "An enumerated attribute indicating the directionality of the element's text.", "d"),
    ("draggable", "An enumerated attribute indicating whether the element can be dragged, using the Drag and Drop API.", "b"),
    ("hidden", "A Boolean attribute indicates that the element is not yet, or is no longer, relevant.", "v"),
    ("id", "Defines a unique identifier (ID) which must be unique in the whole document.", None),
    ("inputmode", "Provides a hint as to the type of data that might be entered by the user while editing the element or its contents.", "im"),
    ("is", "Allows you to specify that a standard HTML element should behave like a registered custom built-in element.", None),
    ("lang", "Helps define the language of an element: the language that non-editable elements are in, or the language that editable elements should be written in by the user.", None),
    ("role", "Defines an explicit role for an element for use by assistive technologies.", "roles"),
    ("slot", "Assigns a slot in a shadow DOM shadow tree to an element.", None),
    ("spellcheck", "An enumerated attribute defines whether the element may be checked for spelling errors.", "b"),
    ("style", "Contains CSS styling declarations to be applied to the element.", None),
    ("tabindex", "An integer attribute indicating if the element can take input focus (is focusable), if it should participate to sequential keyboard navigation, and if so, at what position.", None),
    ("title", "Contains a text representing advisory information related to the element it belongs to.", None),
    ("translate", "An enumerated attribute that is used to specify whether an element's attribute values and the values of its Text node children are to be translated when the page is localized, or whether to leave them unchanged.", "y"),
)

_EVENT_HANDLERS: tuple[str, ...] = (
    "onabort",
    "onblur",
    "oncanplay",
    "oncanplaythrough",
    "onchange",
    "onclick",
    "oncontextmenu",
    "oncopy",
    "oncut",
    "ondblclick",
    "ondrag",
    "ondragend",
    "ondragenter",
    "ondragleave",
    "ondragover",
    "ondragstart",
    "ondrop",
    "ondurationchange",
    "onended",
    "onerror",
    "onfocus",
    "onfocusin",
    "onfocusout",
    "oninput",
    "oninvalid",
    "onkeydown",
    "onkeypress",
    "onkeyup",
    "onload",
    "onloadeddata",
    "onloadedmetadata",
    "onloadstart",
    "onmousedown",
    "onmouseenter",
    "onmouseleave",
    "onmousemove",
    "onmouseout",
    "onmouseover",
    "onmouseup",
    "onpaste",
    "onpause",
    "onplay",
    "onplaying",
    "onpointerdown",
    "onpointermove",
    "onpointerup",
    "onprogress",
    "onreset",
    "onresize",
    "onscroll",
    "onseeked",
    "onseeking",
    "onselect",
    "onsubmit",
    "ontimeupdate",
    "ontouchend",
    "ontouchmove",
    "ontouchstart",
    "onvolumechange",
    "onwaiting",
    "onwheel",
)

VALUE_SETS: dict[str, tuple[str, ...]] = {
    "b": ("true", "false"),
    "u": ("true", "false", "undefined"),
    "o": ("on", "off"),
    "y": ("yes", "no"),
    "w": ("soft", "hard"),
    "d": ("ltr", "rtl", "auto"),
    "m": ("get", "post", "dialog"),
    "fm": ("get", "post"),
    "s": ("row", "col", "rowgroup", "colgroup"),
    "t": (
        "hidden",
        "text",
        "search",
        "tel",
        "url",
        "email",
        "password",
        "datetime",
        "date",
        "month",
        "week",
        "time",
        "datetime-local",
        "number",
        "range",
        "color",
        "checkbox",
        "radio",
        "file",
        "submit",
        "image",
        "reset",
        "button",
    ),
    "im": ("verbatim", "latin", "latin-name", "latin-prose", "full-width-latin", "kana", "kana-name", "katakana", "numeric", "tel", "email", "url"),
    "bt": ("button", "submit", "reset", "menu"),
    "lt": ("1", "a", "A", "i", "I"),
    "et": ("application/x-www-form-urlencoded", "multipart/form-data", "text/plain"),
    "tk": ("subtitles", "captions", "descriptions", "chapters", "metadata"),
    "pl": ("none", "metadata", "auto"),
    "sh": ("circle", "default", "poly", "rect"),
    "xo": ("anonymous", "use-credentials"),
    "target": ("_self", "_blank", "_parent", "_top"),
    "sb": ("allow-forms", "allow-modals", "allow-pointer-lock", "allow-popups", "allow-popups-to-escape-sandbox", "allow-same-origin", "allow-scripts", "allow-top-navigation"),
    "decoding": ("sync", "async", "auto"),
    "loading": ("eager", "lazy"),
    "inputautocomplete": ("on", "off", "name", "email", "username", "new-password", "current-password", "street-address", "postal-code", "country", "tel", "url"),
    "roles": (
        "alert",
        "alertdialog",
        "button",
        "checkbox",
        "dialog",
        "grid",
        "link",
        "listbox",
        "menu",
        "menuitem",
        "navigation",
        "option",
        "progressbar",
        "radio",
        "region",
        "search",
        "slider",
        "tab",
        "tablist",
        "tabpanel",
        "textbox",
        "tooltip",
    ),
}

# Svelte specific elements
_SVELTE_TAGS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("svelte:self", "Allows a component to include itself, recursively.\n\nIt cannot appear at the top level of your markup; it must be inside an if or each block to prevent an infinite loop.", ()),
    ("svelte:component", "Renders a component dynamically, using the component constructor specified as the `this` property. When the property changes, the component is destroyed and recreated.\n\nIf `this` is falsy, no component is rendered.", ("this",)),
    ("svelte:window", "Allows you to add event listeners to the `window` object without worrying about removing them when the component is destroyed, or checking for the existence of `window` when server-side rendering.", ("bind:innerWidth", "bind:innerHeight", "bind:outerWidth", "bind:outerHeight", "bind:scrollX", "bind:scrollY", "bind:online")),
    ("svelte:body", "As with `svelte:window`, this element allows you to add listeners to events on `document.body`, such as mouseenter and mouseleave which don't fire on window.", ()),
    ("svelte:head", "This element makes it possible to insert elements into `document.head`. During server-side rendering, head content is exposed separately to the main html content.", ()),
    ("svelte:options", "Provides a place to specify per-component compiler options.", ("immutable", "accessors", "namespace", "tag")),
    ("svelte:fragment", "Allows you to place content in a named slot without wrapping it in a container DOM element. This keeps the flow layout of your document intact.", ("slot",)),
)

_SVELTE_GLOBAL_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("bind:this", "To get a reference to a DOM node, use `bind:this`. If used on a component, gets a reference to that component instance."),
    ("class:", "A `class:` directive provides a shorter way of toggling a class on an element."),
    ("use:", "Actions are functions that are called when an element is created."),
    ("transition:", "A `transition:` is triggered by an element entering or leaving the DOM as a result of a state change."),
    ("in:", "Similar to `transition:`, but only applies to elements entering the DOM."),
    ("out:", "Similar to `transition:`, but only applies to elements leaving the DOM."),
    ("animate:", "An animation is triggered when the contents of a keyed each block are re-ordered."),
    ("let:", "Slots can be rendered zero or more times, and can pass values back to the parent using props. The parent exposes the values to the slot template using the `let:` directive."),
)


class HTMLDataProvider:
    """Lookup of tags, attributes and attribute values for one vocabulary."""

    def __init__(
        self,
        provider_id: str,
        tags: dict[str, TagInfo],
        global_attributes: dict[str, AttributeInfo],
        attributes: dict[str, AttributeInfo] | None = None,
        value_sets: dict[str, tuple[str, ...]] | None = None,
    ):
        self.id = provider_id
        self.tags = tags
        self.global_attributes = global_attributes
        self.attributes = attributes or {}
        self.value_sets = value_sets or {}

    def __repr__(self) -> str:
        return f"HTMLDataProvider({self.id!r}, tags={len(self.tags)})"

    def get_tag(self, name: str) -> TagInfo | None:
        return self.tags.get(name.lower())

    def provide_tags(self) -> list[TagInfo]:
        return list(self.tags.values())

    def provide_attributes(self, tag: str) -> list[AttributeInfo]:
        """Attributes valid on ``tag``: element specific first, then global ones."""
        result: list[AttributeInfo] = []
        tag_info = self.get_tag(tag)
        if tag_info is not None:
            result.extend(self.attributes[f"{tag_info.name}/{name}"] for name in tag_info.attributes)
        result.extend(self.global_attributes.values())
        return result

    def get_attribute(self, tag: str, name: str) -> AttributeInfo | None:
        name = name.lower()
        for attribute in self.provide_attributes(tag):
            if attribute.name.lower() == name:
                return attribute
        return None

    def provide_values(self, tag: str, attribute: str) -> list[str]:
        info = self.get_attribute(tag, attribute)
        if info is None or info.value_set is None:
            return []
        return list(self.value_sets.get(info.value_set, ()))


def _element_references(name: str) -> tuple[tuple[str, str], ...]:
    page = "Heading_Elements" if name in HEADING_ELEMENTS else name
    return (("MDN Reference", MDN_ELEMENT_URL.format(page)),)


def _build_html5_provider() -> HTMLDataProvider:
    tags: dict[str, TagInfo] = {}
    attributes: dict[str, AttributeInfo] = {}
    for name, description, tag_attributes in _HTML_TAGS:
        attribute_names = []
        for entry in tag_attributes:
            attribute_name, _, value_set = entry.partition(":")
            attribute_names.append(attribute_name)
            attributes[f"{name}/{attribute_name}"] = AttributeInfo(
                name=attribute_name, value_set=value_set or None
            )
        tags[name] = TagInfo(
            name=name,
            description=description,
            references=_element_references(name),
            attributes=tuple(attribute_names),
            void=name in VOID_ELEMENTS,
        )

    global_attributes = {
        name: AttributeInfo(
            name=name,
            description=description,
            value_set=value_set,
            references=(("MDN Reference", MDN_GLOBAL_ATTRIBUTE_URL.format(name)),),
        )
        for name, description, value_set in _GLOBAL_ATTRIBUTES
    }
    for name in _EVENT_HANDLERS:
        global_attributes[name] = AttributeInfo(name=name, value_set="handler")

    return HTMLDataProvider("html5", tags, global_attributes, attributes, VALUE_SETS)


def _build_svelte_provider() -> HTMLDataProvider:
    tags: dict[str, TagInfo] = {}
    attributes: dict[str, AttributeInfo] = {}
    for name, description, tag_attributes in _SVELTE_TAGS:
        anchor = name.replace(":", "_")
        for attribute_name in tag_attributes:
            attributes[f"{name}/{attribute_name}"] = AttributeInfo(
                name=attribute_name, directive=True
            )
        tags[name] = TagInfo(
            name=name,
            description=description,
            references=(("Svelte Docs", SVELTE_DOCS_URL.format(anchor)),),
            attributes=tag_attributes,
        )

    global_attributes = {
        name: AttributeInfo(name=name, description=description, directive=True)
        for name, description in _SVELTE_GLOBAL_ATTRIBUTES
    }
    for handler in _EVENT_HANDLERS:
        event = handler[2:]
        global_attributes[f"on:{event}"] = AttributeInfo(
            name=f"on:{event}",
            description=f"Listens to the `{event}` DOM event.",
            directive=True,
        )

    return HTMLDataProvider("svelte", tags, global_attributes, attributes)


HTML5_PROVIDER = _build_html5_provider()
SVELTE_PROVIDER = _build_svelte_provider()
