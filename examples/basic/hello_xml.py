"""Write a small XML document to stdout — zero config, zero deps."""

import sys

from xmlbuilder import Builder

xml = Builder(sys.stdout)
xml.instruct_xml()
xml.element("people")
xml.element("person", "id", 1)
xml.tag("name", "Joran")
xml.tag("age", 40)
xml.end()
xml.end()
