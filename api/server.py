"""FastAPI web server for the icon loader."""
import os
import re
import tempfile
import uuid
from typing import Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from iconify_loader import IconifyLoader, IconifyLoaderError, LoaderOptions, __version__
from iconify_loader.models import OUTPUT_FORMATS

app = FastAPI(
    title="Iconify Loader API",
    description="Convert SVG icons to React components, cleaned SVG or JSON metadata",
    version=__version__,
)

# Icon names become file names inside the request's temp directory
ICON_NAME = re.compile(r"[A-Za-z0-9_.-]+")

MEDIA_TYPES = {
    "svg": "image/svg+xml",
    "react": "text/plain",
    "json": "application/json",
}


@app.post("/render")
async def render(
    icon: UploadFile = File(...),
    format: str = Form("svg"),
    optimize: bool = Form(False),
    typescript: bool = Form(True),
    name: Optional[str] = Form(None),
):
    """
    Render one uploaded SVG icon in the requested output format.
    """
    if format not in OUTPUT_FORMATS:
        raise HTTPException(400, f"Unsupported format: {format}")

    if name and (not ICON_NAME.fullmatch(name) or not name.strip(".")):
        raise HTTPException(400, f"Invalid icon name: {name}")

    stem = name or os.path.splitext(os.path.basename(icon.filename or ""))[0] or f"icon_{uuid.uuid4().hex[:8]}"

    with tempfile.TemporaryDirectory() as tmpdir:
        input_dir = os.path.join(tmpdir, "input")
        output_dir = os.path.join(tmpdir, "output")
        os.makedirs(input_dir)

        content = await icon.read()
        with open(os.path.join(input_dir, f"{stem}.svg"), "wb") as f:
            f.write(content)

        options = LoaderOptions(
            input_dir=input_dir,
            output_dir=output_dir,
            format=format,
            optimize=optimize,
            typescript=typescript,
        )
        try:
            result = IconifyLoader.load(options)
        except IconifyLoaderError as e:
            raise HTTPException(422, e.to_dict())

        if not result.success or not result.files:
            raise HTTPException(500, {"errors": result.errors})

        file_path = result.files[0]
        with open(file_path, "r", encoding="utf-8") as f:
            body = f.read()

    return Response(
        content=body,
        media_type=MEDIA_TYPES[format],
        headers={
            "Content-Disposition": f'attachment; filename="{os.path.basename(file_path)}"',
            "X-Iconify-Warnings": str(len(result.warnings)),
        },
    )


@app.get("/health")
async def health():
    return {"status": "ok"}
