"""Companion stylesheet for the markup produced by the formatter."""

SCREENPLAY_STYLES = """
.slugline {
    font-weight: bold;
    text-transform: uppercase;
    margin: 30px 0 15px 0;
    font-family: 'Courier Prime', monospace;
    text-decoration: underline;
    font-size: 13pt;
    text-align: center;
}

.action {
    text-align: center;
    width: 100%;
    margin-bottom: 20px;
    font-family: 'Courier Prime', monospace;
    line-height: 1.4;
}

.dialogue-block {
    position: relative;
    margin-bottom: 25px;
    padding-left: 55px;
    page-break-inside: avoid;
    orphans: 3;
    widows: 3;
}

.line-number {
    position: absolute;
    left: 0;
    top: 0;
    font-size: 8pt;
    color: #666;
    font-family: 'Courier Prime', monospace;
    width: 40px;
    text-align: right;
    padding-right: 12px;
    border-right: 1.5pt solid #000;
    height: 100%;
}

.character {
    text-align: left;
    font-weight: bold;
    margin-bottom: 4px;
    text-transform: uppercase;
    font-family: 'Courier Prime', monospace;
    font-size: 10pt;
    display: block;
    opacity: 0.8;
}

.speech {
    text-align: left;
    width: 100%;
    line-height: 1.6;
    font-family: 'Sarabun', sans-serif;
    font-size: 14pt;
    font-weight: 500;
    color: #000;
    word-wrap: break-word;
}
"""

__all__ = ["SCREENPLAY_STYLES"]
