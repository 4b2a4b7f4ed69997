"""Portfolio design generator -- HTTP API.

Generates templates on request and keeps the most recent ones in memory
so previews can be fetched by id.  Persistence is somebody else's job.

Launch:
    python -m designgen.server
    # or: uvicorn designgen.server:app --reload
"""

from __future__ import annotations

import logging
from collections import OrderedDict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from designgen.art.palettes import InvalidPaletteError
from designgen.render.preview import image_to_base64, image_to_png, render_template
from designgen.template.generator import TemplateGenerator
from designgen.template.model import (
    GeneratedTemplate,
    GenerationOptions,
    UserPreferences,
    UserProfile,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Portfolio Design Generator")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Application state
# ---------------------------------------------------------------------------

class AppState:
    def __init__(self, generator: TemplateGenerator | None = None):
        self.generator = generator or TemplateGenerator()
        self.preview_size: int = 320
        self.max_history: int = 200
        self._templates: OrderedDict[str, GeneratedTemplate] = OrderedDict()

    def remember(self, template: GeneratedTemplate) -> None:
        self._templates.pop(template.id, None)
        self._templates[template.id] = template
        self.trim()

    def trim(self) -> None:
        """Evict the oldest templates beyond ``max_history``."""
        while len(self._templates) > self.max_history:
            self._templates.popitem(last=False)

    def get(self, template_id: str) -> GeneratedTemplate | None:
        return self._templates.get(template_id)

    def ids(self) -> list[str]:
        return list(self._templates)

    def reset(self) -> None:
        self._templates.clear()

    def get_settings_payload(self) -> dict:
        return {
            "preview_size": self.preview_size,
            "max_history": self.max_history,
            "cached": len(self._templates),
        }


state = AppState()


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class PreferencesModel(BaseModel):
    color_scheme: str | None = None
    layout_style: str | None = None
    animation_style: str | None = None
    reduced_motion: bool | None = None


class ProfileModel(BaseModel):
    profession: str = ""
    industry: str = ""
    experience: str = ""
    skills: list[str] = Field(default_factory=list)
    personality: list[str] = Field(default_factory=list)
    preferences: PreferencesModel = Field(default_factory=PreferencesModel)

    def to_profile(self) -> UserProfile:
        p = self.preferences
        return UserProfile(
            profession=self.profession,
            industry=self.industry,
            experience=self.experience,
            skills=tuple(self.skills),
            personality=tuple(self.personality),
            preferences=UserPreferences(
                color_scheme=p.color_scheme,
                layout_style=p.layout_style,
                animation_style=p.animation_style,
                reduced_motion=p.reduced_motion,
            ),
        )


class OptionsModel(BaseModel):
    randomize_colors: bool = True
    randomize_layout: bool = True
    randomize_animations: bool = True
    randomize_components: bool = True
    ai_enhancement: bool = False

    def to_options(self) -> GenerationOptions:
        return GenerationOptions(
            randomize_colors=self.randomize_colors,
            randomize_layout=self.randomize_layout,
            randomize_animations=self.randomize_animations,
            randomize_components=self.randomize_components,
            ai_enhancement=self.ai_enhancement,
        )


class GenerateRequest(BaseModel):
    base_template: str | None = None
    seed: str | None = None
    profile: ProfileModel = Field(default_factory=ProfileModel)
    options: OptionsModel = Field(default_factory=OptionsModel)


class RegenerateRequest(BaseModel):
    profile: ProfileModel = Field(default_factory=ProfileModel)
    options: OptionsModel = Field(default_factory=OptionsModel)


class SettingsRequest(BaseModel):
    preview_size: int | None = None
    max_history: int | None = None


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------

def _generate(base_template, profile, options, seed=None) -> JSONResponse:
    try:
        template = state.generator.generate(base_template, profile, options, seed=seed)
    except InvalidPaletteError:
        logger.exception("Design tables produced an invalid palette")
        return JSONResponse({"error": "invalid generated palette"}, status_code=500)
    state.remember(template)
    return JSONResponse(template.to_dict())


@app.post("/api/generate")
def api_generate(req: GenerateRequest):
    if req.seed is not None and len(req.seed) > 256:
        return JSONResponse({"error": "Seed too long"}, status_code=400)
    return _generate(req.base_template, req.profile.to_profile(),
                     req.options.to_options(), seed=req.seed)


@app.post("/api/templates/{template_id}/regenerate")
def api_regenerate(template_id: str, req: RegenerateRequest):
    template = state.get(template_id)
    if template is None:
        return JSONResponse({"error": "Unknown template"}, status_code=404)
    return _generate(template.base_template, req.profile.to_profile(),
                     req.options.to_options(), seed=template.metadata.seed)


@app.get("/api/templates")
def api_templates():
    return JSONResponse({"ids": state.ids()})


@app.get("/api/templates/{template_id}")
def api_template(template_id: str):
    template = state.get(template_id)
    if template is None:
        return JSONResponse({"error": "Unknown template"}, status_code=404)
    return JSONResponse(template.to_dict())


@app.get("/api/preview/{template_id}")
def api_preview(template_id: str, raw: int = 0):
    template = state.get(template_id)
    if template is None:
        return JSONResponse({"error": "Unknown template"}, status_code=404)
    img = render_template(template, state.preview_size)
    if raw:
        return Response(content=image_to_png(img), media_type="image/png")
    return JSONResponse({"image": image_to_base64(img), "id": template_id})


@app.get("/api/catalog")
def api_catalog():
    catalog = state.generator.tables.catalog
    return JSONResponse({
        "section_types": catalog.section_types(),
        "counts": catalog.counts(),
        "organisms": len(catalog),
        "total_combinations": catalog.total_combinations(),
    })


@app.get("/api/catalog/{organism_id}")
def api_organism(organism_id: str):
    organism = state.generator.tables.catalog.get(organism_id)
    if organism is None:
        return JSONResponse({"error": "Unknown organism"}, status_code=404)
    return JSONResponse(organism.to_dict())


@app.post("/api/settings")
def api_settings(req: SettingsRequest):
    if req.preview_size is not None:
        state.preview_size = max(64, min(1024, req.preview_size))
    if req.max_history is not None:
        state.max_history = max(1, min(1000, req.max_history))
        state.trim()
    return JSONResponse(state.get_settings_payload())


@app.post("/api/reset")
def api_reset():
    state.reset()
    return JSONResponse(state.get_settings_payload())


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import uvicorn
    print("Starting server at http://localhost:8000")
    uvicorn.run(app, host="0.0.0.0", port=8000)
