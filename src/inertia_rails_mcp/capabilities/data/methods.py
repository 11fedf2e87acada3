"""Static table of Inertia-Rails controller helpers and prop builders."""

from pydantic import BaseModel


class MethodEntry(BaseModel):
    """Reference card for one helper."""

    signature: str
    description: str
    module: str | None = None
    example: str | None = None


CONTROLLER_MODULE = "InertiaRails::Controller"
CONTROLLER_SOURCE = "lib/inertia_rails/controller.rb"

METHODS: dict[str, MethodEntry] = {
    "render": MethodEntry(
        signature="render inertia: component_name, props: {}, view_data: {}",
        description="Render an Inertia response with the specified component and props",
        module=CONTROLLER_MODULE,
        example="""\
def index
  render inertia: 'Users/Index', props: {
    users: User.all.map { |user|
      { id: user.id, name: user.name, email: user.email }
    }
  }
end
""",
    ),
    "inertia_share": MethodEntry(
        signature="inertia_share(key => value) or inertia_share { hash }",
        description="Share data globally across all Inertia responses",
        module=CONTROLLER_MODULE,
        example="""\
class ApplicationController < ActionController::Base
  inertia_share do
    {
      current_user: current_user&.slice(:id, :name, :email),
      flash: flash.to_hash
    }
  end
end
""",
    ),
    "use_inertia_instance_props": MethodEntry(
        signature="use_inertia_instance_props(only: [], except: [])",
        description="Automatically use controller instance variables as Inertia props",
        module=CONTROLLER_MODULE,
        example="""\
class UsersController < ApplicationController
  use_inertia_instance_props only: [:user, :users]

  def show
    @user = User.find(params[:id])
    render inertia: 'Users/Show'
    # @user will be automatically passed as a prop
  end
end
""",
    ),
    "inertia_config": MethodEntry(
        signature="inertia_config(option => value)",
        description="Configure Inertia settings for the controller",
        module=CONTROLLER_MODULE,
        example="""\
class AdminController < ApplicationController
  inertia_config(
    component_path_resolver: ->(path:, action:) { "Admin/#{path}/#{action}" },
    ssr_enabled: false
  )
end
""",
    ),
    "inertia_location": MethodEntry(
        signature="inertia_location(url)",
        description="Perform a client-side redirect in Inertia",
        module=CONTROLLER_MODULE,
        example="""\
def create
  @user = User.create(user_params)
  if @user.save
    inertia_location user_path(@user)
  else
    render inertia: 'Users/New', props: { errors: @user.errors }
  end
end
""",
    ),
    "lazy": MethodEntry(
        signature="lazy { value }",
        description="Create a lazy-loaded prop that only evaluates when explicitly requested",
        module="InertiaRails",
        example="""\
render inertia: 'Dashboard', props: {
  user: current_user,
  stats: lazy {
    expensive_calculation
  }
}
""",
    ),
    "optional": MethodEntry(
        signature="optional { value }",
        description="Create an optional prop that is only included during partial reloads",
        module="InertiaRails",
        example="""\
render inertia: 'Users/Index', props: {
  users: User.all,
  filters: optional {
    available_filters
  }
}
""",
    ),
    "defer": MethodEntry(
        signature="defer(group: nil) { value }",
        description="Create a deferred prop that loads after the initial page render",
        module="InertiaRails",
        example="""\
render inertia: 'Dashboard', props: {
  user: current_user,
  notifications: defer(group: :secondary) {
    current_user.notifications.unread
  }
}
""",
    ),
    "merge": MethodEntry(
        signature="merge { value }",
        description="Create a mergeable prop for handling paginated data",
        module="InertiaRails",
        example="""\
render inertia: 'Posts/Index', props: {
  posts: merge {
    Post.page(params[:page]).map { |post|
      { id: post.id, title: post.title }
    }
  }
}
""",
    ),
}

# Suggestions offered by ``completion/complete`` for the ``method`` argument.
METHOD_COMPLETIONS: tuple[tuple[str, str], ...] = (
    ("render inertia:", "Render an Inertia response"),
    ("inertia_share", "Share data across all Inertia responses"),
    ("use_inertia_instance_props", "Use instance variables as props"),
    ("inertia_config", "Configure Inertia settings"),
    ("inertia_location", "Redirect with Inertia"),
)
