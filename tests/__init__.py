from xml.dom.minidom import parseString

from yopay.xmlutils import child_elements


class XmlTestingMixin(object):

    def _find_element(self, xml_str, element_path):
        doc = parseString(xml_str)
        parent = doc
        for element_name in element_path.split('.'):
            sub_elements = child_elements(parent, element_name)
            if len(sub_elements) == 0:
                return None
            parent = sub_elements[0]
        return parent

    def assertXmlElementEquals(self, xml_str, value, element_path):
        ele = self._find_element(xml_str, element_path)
        if ele is None:
            self.fail("No element matching '%s' found in XML string '%s'" % (
                element_path, xml_str))
        self.assertEqual(value, ele.firstChild.data if ele.firstChild else '')

    def assertXmlElementMissing(self, xml_str, element_path):
        ele = self._find_element(xml_str, element_path)
        if ele is not None:
            self.fail("Unexpected element '%s' found in XML string '%s'" % (
                element_path, xml_str))

    def assertRequestFields(self, xml_str, tags):
        """
        Assert the children of AutoCreate.Request are exactly ``tags``, in
        order
        """
        req = self._find_element(xml_str, 'AutoCreate.Request')
        found = [node.tagName for node in req.childNodes
                 if node.nodeType == node.ELEMENT_NODE]
        self.assertEqual(list(tags), found)
