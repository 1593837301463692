#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

from formpress import CellOptions, Document, HeaderSpec, zip_documents
from formpress.config import load_app_config


def _invoice(config, number: int) -> Document:
    document = Document(config.paper_size, spec=config.layout)
    if config.watermark:
        document.set_watermark(config.watermark)

    pos = document.cursor()
    document.set_big_font_size().set_bold_font_style()
    document.print_text(pos, [f"Invoice #{number:04d}"], font_gap=6)
    document.set_normal_font_size().set_normal_font_style()

    third = document.page_width / 3
    document.print_multiple_input_text(
        pos,
        [
            [
                {"label": "Customer", "value": "ACME Corporation", "width": third * 2},
                {
                    "label": "Date",
                    "value": "2026-01-31",
                    "width": third,
                    "options": {"align": "right"},
                },
            ],
            [
                {
                    "label": "Billing address",
                    "value": "221B Baker Street, London",
                    "width": third * 3,
                },
            ],
        ],
    )

    headers = [
        HeaderSpec("Item", 240),
        HeaderSpec("Qty", 60, options=CellOptions(align="right", gap=2)),
        HeaderSpec("Price", 135, ("Net", "Gross"), CellOptions(align="center")),
    ]
    rows = [
        [f"Line item {index + 1}", str(index % 4 + 1), f"{index * 3.5:.2f}", f"{index * 4.2:.2f}"]
        for index in range(90)
    ]
    document.print_table(pos, headers, rows)

    pos.y += document.spec.gaps.medium
    document.print_input_text(
        pos,
        "Notes",
        "Payment due within 30 days.\nThank you for your business.\nPlease quote the invoice "
        "number on every transfer.",
        document.page_width,
        None,
        CellOptions(fit_overflow=True),
    )
    document.finalize()
    return document


def main(config_path: str | Path | None = None, paper_size: str | None = None) -> None:
    config = load_app_config(config_path, paper_size=paper_size)

    documents = [_invoice(config, number) for number in (1, 2)]
    for number, document in enumerate(documents, start=1):
        output = Path(f"render_demo_invoice_{number}.pdf")
        output.write_bytes(document.buffer)
        print(f"Wrote {output} ({document.total_page_number} pages)")

    bundle = Path("render_demo_invoices.zip")
    bundle.write_bytes(
        zip_documents(
            (f"invoice_{number}.pdf", document)
            for number, document in enumerate(documents, start=1)
        )
    )
    print(f"Wrote {bundle}")


if __name__ == "__main__":
    main()
