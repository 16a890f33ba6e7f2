from xml.dom import Node


def create_element(doc, parent, tag, value=None):
    """
    Creates an XML element
    """
    ele = doc.createElement(tag)
    parent.appendChild(ele)
    if value is not None:
        text = doc.createTextNode(u"%s" % value)
        ele.appendChild(text)
    return ele


def child_elements(parent, tag):
    """
    Return the direct children of ``parent`` with the given tag name.

    Unlike ``getElementsByTagName`` this does not descend, which matters as
    the gateway reuses names such as ``TransactionStatus`` and ``Balance`` at
    different depths.
    """
    if parent is None:
        return []
    return [node for node in parent.childNodes
            if node.nodeType == Node.ELEMENT_NODE and node.tagName == tag]


def child_element(parent, tag):
    elements = child_elements(parent, tag)
    if elements:
        return elements[0]
    return None


def element_text(ele):
    if ele is None:
        return u''
    return u''.join(node.data for node in ele.childNodes
                    if node.nodeType in (Node.TEXT_NODE,
                                         Node.CDATA_SECTION_NODE))


def child_text(parent, tag):
    return element_text(child_element(parent, tag))
